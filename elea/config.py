import os


# Logging
LOG_LEVEL = (os.getenv("ELEA_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FILE = os.getenv("ELEA_LOG_FILE", "").strip()
LOG_MAX_BYTES = int(os.getenv("ELEA_LOG_MAX_BYTES", str(10 * 1024 * 1024)))
LOG_BACKUP_COUNT = int(os.getenv("ELEA_LOG_BACKUP_COUNT", "5"))

# Encoding
_raw_indent = os.getenv("ELEA_JSON_INDENT", "2").strip()
JSON_INDENT = int(_raw_indent) if _raw_indent else None

# Used for paths that carry no suffix
DEFAULT_FORMAT = os.getenv("ELEA_DEFAULT_FORMAT", "json").strip().lower()
if DEFAULT_FORMAT not in {"json", "yaml"}:
    raise ValueError("ELEA_DEFAULT_FORMAT must be 'json' or 'yaml'")
