"""
Opaque identifiers. Every id is a plain string on the wire; cross references
between records are always carried as ids, never as nested owned records.
"""

from typing import NewType

AbstractionId = NewType("AbstractionId", str)
StateId = NewType("StateId", str)
ArrowId = NewType("ArrowId", str)
AdditionId = NewType("AdditionId", str)

ComputerId = NewType("ComputerId", str)
TypeId = NewType("TypeId", str)
ContinuationId = NewType("ContinuationId", str)
PropertyId = NewType("PropertyId", str)
ComputationId = NewType("ComputationId", str)
ProofId = NewType("ProofId", str)

AgentId = NewType("AgentId", str)
FunctionId = NewType("FunctionId", str)
StoryId = NewType("StoryId", str)

ProgramId = NewType("ProgramId", str)
ProgramName = NewType("ProgramName", str)
ProgramDescription = NewType("ProgramDescription", str)

__all__ = [
    "AbstractionId",
    "StateId",
    "ArrowId",
    "AdditionId",
    "ComputerId",
    "TypeId",
    "ContinuationId",
    "PropertyId",
    "ComputationId",
    "ProofId",
    "AgentId",
    "FunctionId",
    "StoryId",
    "ProgramId",
    "ProgramName",
    "ProgramDescription",
]
