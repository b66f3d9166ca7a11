"""
Elea: serializable records for programs built from space, time and agency.
The record models live in definitions/spec; codec turns them into JSON or
YAML documents and back.
"""

from .definitions import (
    Addition,
    Agency,
    Agent,
    Application,
    Arrow,
    Computation,
    Computer,
    Continuation,
    Function,
    Method,
    Program,
    ProgramIdentity,
    Proof,
    Proofs,
    Property,
    Reference,
    Set,
    Space,
    Story,
    Theory,
    Time,
    Type,
    no_identity,
    nowhere,
)
from .errors import DecodeError, EleaError, ProgramNotFound, UnsupportedFormat
from .spec import Metadata, Spec

__all__ = [
    "Addition",
    "Agency",
    "Agent",
    "Application",
    "Arrow",
    "Computation",
    "Computer",
    "Continuation",
    "Function",
    "Method",
    "Program",
    "ProgramIdentity",
    "Proof",
    "Proofs",
    "Property",
    "Reference",
    "Set",
    "Space",
    "Story",
    "Theory",
    "Time",
    "Type",
    "no_identity",
    "nowhere",
    "Metadata",
    "Spec",
    "EleaError",
    "DecodeError",
    "UnsupportedFormat",
    "ProgramNotFound",
]
