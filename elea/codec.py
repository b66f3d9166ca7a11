"""
JSON and YAML encodings of Elea records.

Both encodings carry the same tree: objects keyed by wire field names, ids as
bare strings, lists in their original order. YAML exists for hand editing;
JSON is the interchange form.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from elea import config
from elea.errors import DecodeError, UnsupportedFormat

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def to_dict(record: BaseModel) -> Dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True)


def from_dict(cls: Type[R], data: Any) -> R:
    try:
        return cls.model_validate(data)
    except ValidationError as e:
        raise DecodeError.from_validation(cls.__name__, e) from e


def dumps(record: BaseModel, indent: int | None = None) -> str:
    return record.model_dump_json(by_alias=True, indent=indent)


def loads(cls: Type[R], text: str | bytes) -> R:
    """Decode JSON text; malformed JSON and shape errors both raise DecodeError."""
    try:
        return cls.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError.from_validation(cls.__name__, e) from e


def dump_yaml(record: BaseModel) -> str:
    # Non-ASCII stays escaped; raw NEL or LS inside a scalar is folded on load.
    return yaml.safe_dump(to_dict(record), sort_keys=False)


def load_yaml(cls: Type[R], text: str | bytes) -> R:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DecodeError(cls.__name__, [f"<root>: invalid YAML ({e})"]) from e
    return from_dict(cls, data)


def format_for(path: str | Path) -> str:
    """Return "json" or "yaml" for a path, by suffix.

    A path without a suffix uses ELEA_DEFAULT_FORMAT. Any other suffix raises
    UnsupportedFormat, including the last part of a dotted name such as
    "my.world".
    """
    suffix = Path(path).suffix.lower()
    if not suffix:
        return config.DEFAULT_FORMAT
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise UnsupportedFormat(
            f"Unsupported file suffix {suffix!r} (expected one of {', '.join(sorted(_SUFFIX_FORMATS))})"
        ) from None


def encode(record: BaseModel, fmt: str) -> str:
    if fmt == "json":
        return dumps(record, indent=config.JSON_INDENT) + "\n"
    if fmt == "yaml":
        return dump_yaml(record)
    raise UnsupportedFormat(f"Unsupported format {fmt!r}")


def decode(cls: Type[R], text: str | bytes, fmt: str) -> R:
    if fmt == "json":
        return loads(cls, text)
    if fmt == "yaml":
        return load_yaml(cls, text)
    raise UnsupportedFormat(f"Unsupported format {fmt!r}")


def _write_document(path: Path, text: str) -> None:
    """Replace `path` with `text` in one step; readers see the old or the new document."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def save(record: BaseModel, path: str | Path) -> Path:
    target = Path(path).expanduser()
    fmt = format_for(target)
    _write_document(target, encode(record, fmt))
    logger.debug("Wrote %s to %s (%s)", type(record).__name__, target, fmt)
    return target


def load(cls: Type[R], path: str | Path) -> R:
    source = Path(path).expanduser()
    fmt = format_for(source)
    raw = source.read_bytes()
    logger.debug("Read %d bytes from %s (%s)", len(raw), source, fmt)
    return decode(cls, raw, fmt)
