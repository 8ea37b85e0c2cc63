"""
Search functions for vault-core.

Contains regex search across note bodies and tag search.
"""

import os
import re
from pathlib import Path

import structlog

from .config import require_vault_root
from .utils import NOTE_EXTENSION, TEMP_MARKER, SearchPatternError, relative_posix

logger = structlog.get_logger(__name__)


def _searchable_files(root: Path) -> list[Path]:
    """All ``.md`` files under root whose relative path has no ``~``."""
    files: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root):
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix != f".{NOTE_EXTENSION}":
                continue
            rel_path = relative_posix(path, root)
            if rel_path is None or TEMP_MARKER in rel_path:
                continue
            files.append(path)
    return sorted(files)


def search(pattern: str, vault_root: Path | str | None) -> list[Path]:
    """Case-insensitive regex search over note files.

    Matches are file level: each matching file appears once.

    Raises:
        ConfigurationError: If the vault root is unset or missing
        SearchPatternError: If ``pattern`` is not a valid regex
    """
    root = require_vault_root(vault_root)

    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise SearchPatternError(f"Invalid search pattern '{pattern}': {e}") from e

    results: list[Path] = []
    for path in _searchable_files(root):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("note_read_failed", path=str(path), error=str(e))
            continue
        if regex.search(content):
            results.append(path)

    logger.debug("search_completed", pattern=pattern, results=len(results))
    return results


def search_by_tag(tag: str, vault_root: Path | str | None) -> list[Path]:
    """Find notes containing a tag, compared case-insensitively."""
    return search(re.escape(tag.lower()), vault_root)
