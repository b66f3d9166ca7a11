import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from elea import codec, config
from elea.definitions import Program
from elea.errors import DecodeError, UnsupportedFormat
from elea.references import dangling_references, duplicate_arrow_endpoints
from elea.spec import Metadata, Spec

logger = logging.getLogger("elea.cli")

_KINDS = {"spec": Spec, "program": Program}


def setup_logging(level_name: Optional[str] = None) -> None:
    elea_logger = logging.getLogger("elea")
    if getattr(elea_logger, "_configured", False):
        return

    level = getattr(logging, (level_name or config.LOG_LEVEL).upper(), logging.INFO)
    elea_logger.setLevel(level)
    elea_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    elea_logger.addHandler(stream_handler)

    if config.LOG_FILE:
        try:
            Path(config.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                config.LOG_FILE,
                maxBytes=config.LOG_MAX_BYTES,
                backupCount=config.LOG_BACKUP_COUNT,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            elea_logger.addHandler(file_handler)
        except OSError:
            elea_logger.exception("Failed to configure ELEA_LOG_FILE=%r", config.LOG_FILE)

    elea_logger._configured = True


def _programs_of(document) -> List[Program]:
    if isinstance(document, Spec):
        return list(document.programs)
    return [document]


def _load(path: str, kind: str):
    try:
        return codec.load(_KINDS[kind], path)
    except FileNotFoundError:
        print(f"File not found: {path}", file=sys.stderr)
    except OSError as e:
        print(f"Cannot read {path}: {e.strerror or e}", file=sys.stderr)
    except UnsupportedFormat as e:
        print(str(e), file=sys.stderr)
    except DecodeError as e:
        print(f"Invalid {kind} document: {path}", file=sys.stderr)
        for problem in e.errors:
            print(f"  {problem}", file=sys.stderr)
    return None


def cmd_validate(args) -> int:
    document = _load(args.path, args.kind)
    if document is None:
        return 1
    programs = _programs_of(document)
    logger.info("Validated %s (%d program(s))", args.path, len(programs))
    print(f"OK: {args.kind} {args.path} ({len(programs)} program(s))")
    return 0


def cmd_convert(args) -> int:
    document = _load(args.src, args.kind)
    if document is None:
        return 1
    try:
        target = codec.save(document, args.dst)
    except UnsupportedFormat as e:
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot write {args.dst}: {e.strerror or e}", file=sys.stderr)
        return 1
    logger.info("Converted %s -> %s", args.src, target)
    return 0


def cmd_init(args) -> int:
    target = Path(args.path)
    if target.exists() and not args.force:
        print(f"Refusing to overwrite existing file: {target} (use --force)", file=sys.stderr)
        return 1
    spec = Spec(
        metadata=Metadata(
            id=args.id or target.stem,
            name=args.name or target.stem,
            description=args.description,
            version=args.version,
            author=args.author,
        ),
    )
    try:
        codec.save(spec, target)
    except UnsupportedFormat as e:
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot write {target}: {e.strerror or e}", file=sys.stderr)
        return 1
    logger.info("Created empty spec at %s", target)
    return 0


def cmd_check(args) -> int:
    document = _load(args.path, args.kind)
    if document is None:
        return 1

    total = 0
    for program in _programs_of(document):
        dangling = dangling_references(program)
        total += len(dangling)
        for ref in dangling:
            print(f"{program.identity.id}: {ref}")
        for (init, term), arrow_ids in duplicate_arrow_endpoints(program).items():
            logger.warning(
                "%s: arrows %s share endpoints (%s -> %s)",
                program.identity.id,
                ", ".join(arrow_ids),
                init,
                term,
            )

    if total:
        logger.warning("%d dangling reference(s) in %s", total, args.path)
        return 1
    print(f"OK: no dangling references in {args.path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="elea", add_help=True)
    parser.add_argument("--log-level", default=None, help="Overrides ELEA_LOG_LEVEL.")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Decode a document and report problems.")
    validate.add_argument("path")
    validate.add_argument("--kind", choices=sorted(_KINDS), default="spec")
    validate.set_defaults(func=cmd_validate)

    convert = sub.add_parser("convert", help="Re-encode a document as JSON or YAML.")
    convert.add_argument("src")
    convert.add_argument("dst")
    convert.add_argument("--kind", choices=sorted(_KINDS), default="spec")
    convert.set_defaults(func=cmd_convert)

    init = sub.add_parser(
        "init",
        help="Write an empty spec document.",
        description=(
            "The format follows the suffix: .json, .yaml or .yml. A name without a suffix "
            "uses ELEA_DEFAULT_FORMAT; a dotted name such as my.world is rejected, "
            "so write my.world.json instead."
        ),
    )
    init.add_argument("path")
    init.add_argument("--id", default=None)
    init.add_argument("--name", default=None)
    init.add_argument("--description", default="")
    init.add_argument("--version", default="0.0.1")
    init.add_argument("--author", default="")
    init.add_argument("--force", action="store_true", help="Overwrite an existing file.")
    init.set_defaults(func=cmd_init)

    check = sub.add_parser("check", help="List ids that name nothing the program declares.")
    check.add_argument("path")
    check.add_argument("--kind", choices=sorted(_KINDS), default="spec")
    check.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
