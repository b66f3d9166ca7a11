"""
Record shapes of an Elea program.

The models mirror the formal structure one to one: no indexes, no derived
fields, nothing added for ease of use. Sections follow the three parts of a
theory (space, time, agency), each split into its theory records and the
application records that accumulate as history.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from elea.ids import (
    AbstractionId,
    AdditionId,
    AgentId,
    ArrowId,
    ComputationId,
    ComputerId,
    ContinuationId,
    FunctionId,
    ProgramDescription,
    ProgramId,
    ProgramName,
    PropertyId,
    ProofId,
    StateId,
    StoryId,
    TypeId,
)


class Record(BaseModel):
    """Common base: unknown keys are rejected, wire aliases and field names both accepted."""

    class Config:
        extra = "forbid"
        populate_by_name = True


# ---------------------------------------------------------------------------
#  SPACE / theory
# ---------------------------------------------------------------------------

class Arrow(Record):
    # Possibly unique per (init_state_id, term_state_id); see references.duplicate_arrow_endpoints
    id: ArrowId
    init_state_id: StateId
    term_state_id: StateId


class Space(Record):
    abstractions: List[AbstractionId] = Field(default_factory=list)
    states: List[StateId] = Field(default_factory=list)
    arrows: List[Arrow] = Field(default_factory=list)


class Set(Record):
    """Groups input states into output states, the way a join produces a table from tables."""

    input: List[StateId] = Field(default_factory=list)
    output: List[StateId] = Field(default_factory=list)


# ---------------------------------------------------------------------------
#  SPACE / application
# ---------------------------------------------------------------------------

class Addition(Record):
    """An expansion of space."""

    id: AdditionId
    abstractions: List[AbstractionId] = Field(default_factory=list)
    states: List[StateId] = Field(default_factory=list)
    arrows: List[Arrow] = Field(default_factory=list)


# ---------------------------------------------------------------------------
#  TIME / theory
# ---------------------------------------------------------------------------

class Property(Record):
    id: PropertyId


class Computer(Record):
    id: ComputerId
    type_: TypeId = Field(alias="type")
    properties: List[PropertyId] = Field(default_factory=list)


class Continuation(Record):
    id: ContinuationId
    function_ref: FunctionId


class Type(Record):
    id: TypeId
    expansion: List[Addition] = Field(default_factory=list)
    extension: List[Continuation] = Field(default_factory=list)


class Time(Record):
    computers: List[Computer] = Field(default_factory=list)
    types: List[Type] = Field(default_factory=list)
    properties: List[Property] = Field(default_factory=list)


# ---------------------------------------------------------------------------
#  TIME / application
# ---------------------------------------------------------------------------

class Proof(Record):
    id: ProofId
    continuation_id: ContinuationId
    story_id: StoryId


class Proofs(Record):
    premises: List[Proof] = Field(default_factory=list)
    conclusions: List[Proof] = Field(default_factory=list)


class Computation(Record):
    """Bridge between space and time: an arrow taken by a computer."""

    computation_id: ComputationId
    arrow_id: ArrowId
    computer_id: ComputerId
    proofs: List[Proof] = Field(default_factory=list)


# ---------------------------------------------------------------------------
#  AGENCY / theory
# ---------------------------------------------------------------------------

class Agent(Record):
    id: AgentId
    computers: List[ComputerId] = Field(default_factory=list)


class Function(Record):
    function_id: FunctionId
    init_state_id: StateId
    term_state_id: StateId


class Method(Record):
    program_id: ProgramId
    function_id: FunctionId


class Agency(Record):
    agents: List[Agent] = Field(default_factory=list)
    functions: List[Function] = Field(default_factory=list)


# ---------------------------------------------------------------------------
#  AGENCY / application
# ---------------------------------------------------------------------------

class Story(Record):
    """Ordered history of computations attributed to one agent."""

    id: StoryId
    agent_id: AgentId
    events: List[ComputationId] = Field(default_factory=list)


# ---------------------------------------------------------------------------
#  PROGRAM
# ---------------------------------------------------------------------------

class ProgramIdentity(Record):
    id: ProgramId
    name: ProgramName
    description: ProgramDescription
    creator: Agent


class Theory(Record):
    space: Space = Field(default_factory=Space)
    time: Time = Field(default_factory=Time)
    agency: Agency = Field(default_factory=Agency)


class Application(Record):
    additions: List[Addition] = Field(default_factory=list)
    computations: List[Computation] = Field(default_factory=list)
    stories: List[Story] = Field(default_factory=list)


class Program(Record):
    identity: ProgramIdentity
    theory: Theory = Field(default_factory=Theory)
    applications: List[Application] = Field(default_factory=list)


class Reference(Record):
    """A location inside a program, optionally pinned to an arrow."""

    program_id: ProgramId
    abstraction_id: AbstractionId
    state_id: StateId
    arrow_id: Optional[ArrowId] = None


def no_identity() -> ProgramIdentity:
    """Vacuous program identity."""
    return ProgramIdentity(
        id=ProgramId(""),
        name=ProgramName(""),
        description=ProgramDescription(""),
        creator=Agent(id=AgentId("")),
    )


def nowhere() -> Reference:
    return Reference(
        program_id=ProgramId(""),
        abstraction_id=AbstractionId(""),
        state_id=StateId(""),
    )
