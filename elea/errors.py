from typing import Any, Dict, List


class EleaError(Exception):
    """Base class for every error raised by the elea package."""


class DecodeError(EleaError, ValueError):
    """A document could not be turned into the requested record."""

    def __init__(self, kind: str, errors: List[str]):
        self.kind = kind
        self.errors = list(errors)
        detail = "; ".join(self.errors) if self.errors else "unknown error"
        super().__init__(f"Failed to decode {kind}: {detail}")

    @classmethod
    def from_validation(cls, kind: str, exc: Any) -> "DecodeError":
        """Build from a pydantic ValidationError, one entry per failing field."""
        problems: List[str] = []
        for err in exc.errors():
            problems.append(_format_problem(err))
        return cls(kind, problems)


class UnsupportedFormat(EleaError, ValueError):
    """A file suffix that maps to no known encoding."""


class ProgramNotFound(EleaError, KeyError):
    def __init__(self, program_id: str):
        self.program_id = program_id
        super().__init__(program_id)

    def __str__(self) -> str:
        return f"No program with id {self.program_id!r}"


def _format_problem(err: Dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
    return f"{loc}: {err.get('msg', 'invalid value')}"
