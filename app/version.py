"""Release identifier and clock helpers."""

from datetime import datetime
from pathlib import Path


class VersionUnavailableError(RuntimeError):
    """The VERSION file is missing or cannot be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read version file {path}: {reason}")


def read_version(path: Path) -> str:
    """Return the contents of the VERSION file with surrounding whitespace stripped.

    The file is read on every call; nothing is cached.
    """
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise VersionUnavailableError(Path(path), type(exc).__name__) from exc


def current_timestamp() -> str:
    # Local time with offset, e.g. 2026-10-19T12:00:00+02:00
    return datetime.now().astimezone().isoformat(timespec="seconds")
