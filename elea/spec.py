from typing import List

from pydantic import Field

from elea.definitions import Program, Record
from elea.errors import ProgramNotFound


class Metadata(Record):
    id: str
    name: str
    description: str
    version: str
    author: str


class Spec(Record):
    """A named, versioned collection of programs."""

    metadata: Metadata
    programs: List[Program] = Field(default_factory=list)

    def program(self, program_id: str) -> Program:
        for candidate in self.programs:
            if candidate.identity.id == program_id:
                return candidate
        raise ProgramNotFound(program_id)
