"""
Vault scanning for vault-core.

Walks the vault root and applies the document eligibility rules.
"""

import os
from pathlib import Path

import structlog

from .config import require_vault_root
from .models import Document
from .utils import (
    NOTE_EXTENSION,
    TEMP_MARKER,
    TRASH_DIR,
    lexical_relative,
    relative_posix,
)

logger = structlog.get_logger(__name__)


def is_eligible(path: Path, vault_root: Path) -> bool:
    """Check whether a file is an indexable vault document.

    A document is eligible when it has the ``md`` extension, lies strictly
    under the vault root by resolved-path comparison, has no ``.trash``
    path segment, and its relative path contains no ``~``. The segment
    rules apply to both the path as walked and the resolved path.
    """
    if path.suffix.lstrip(".") != NOTE_EXTENSION:
        return False

    canonical = relative_posix(path, vault_root)
    if canonical is None:
        return False

    for rel_path in {canonical, lexical_relative(path, vault_root) or canonical}:
        if TRASH_DIR in rel_path.split("/") or TEMP_MARKER in rel_path:
            return False
    return True


def _on_walk_error(error: OSError) -> None:
    logger.warning("scan_dir_failed", path=error.filename, error=str(error))


def list_files(vault_root: Path | str | None) -> list[Document]:
    """Enumerate every eligible document under the vault root.

    Results are sorted by relative path. A symlinked note keeps the
    relative path it was found under. Unreadable directories are logged
    and skipped.

    Raises:
        ConfigurationError: If the vault root is unset or missing
    """
    root = require_vault_root(vault_root)
    documents: list[Document] = []

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        for filename in filenames:
            path = Path(dirpath) / filename
            if not is_eligible(path, root):
                continue
            documents.append(Document(
                path=path,
                rel_path=lexical_relative(path, root),
                extension=NOTE_EXTENSION,
            ))

    documents.sort(key=lambda d: d.rel_path)
    logger.debug("vault_scanned", root=str(root), documents=len(documents))
    return documents
