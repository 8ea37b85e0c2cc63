"""
Utility functions and compiled regex patterns for vault-core.

Contains the exception hierarchy, pre-compiled patterns, and path helpers.
"""

import os
import re
from pathlib import Path

# Pre-compiled regex patterns for performance
TAG_PATTERN = re.compile(r'#[\w/+-]+')
WIKILINK_PATTERN = re.compile(r'\[\[([^\]|]+)(?:\|([^\]]*))?\]\]')
MARKDOWN_LINK_PATTERN = re.compile(r'\[([^\]]*)\]\(([^)]+)\)')

FRONTMATTER_DELIMITER = "---"
NOTE_EXTENSION = "md"
TRASH_DIR = ".trash"
TEMP_MARKER = "~"


# ============== Exceptions ==============

class VaultError(Exception):
    """Base class for vault-core errors."""
    pass


class ConfigurationError(VaultError):
    """Raised when the vault root is unset, missing, or not a directory."""
    pass


class FrontMatterParseError(VaultError):
    """Raised when a document's front matter block cannot be parsed."""
    pass


class SearchPatternError(VaultError):
    """Raised when a search pattern is not a valid regular expression."""
    pass


# ============== Path Helpers ==============

def relative_posix(path: Path, root: Path) -> str | None:
    """Return ``path`` relative to ``root`` with POSIX separators.

    Both sides are resolved first so symlinks and case differences on
    case-insensitive filesystems compare canonically. Returns None when the
    path is not strictly under the root.
    """
    try:
        rel = path.resolve().relative_to(root.resolve())
    except (ValueError, OSError):
        return None

    if not rel.parts:
        return None
    return rel.as_posix()


def lexical_relative(path: Path, root: Path) -> str | None:
    """Return ``path`` relative to ``root`` without following symlinks."""
    try:
        rel = Path(os.path.normpath(path)).relative_to(os.path.normpath(root))
    except ValueError:
        return None

    if not rel.parts or rel.parts[0] == "..":
        return None
    return rel.as_posix()


def has_extension(target: str) -> bool:
    """Check whether the last path segment of ``target`` carries an extension."""
    name = target.rsplit("/", 1)[-1]
    stem, dot, suffix = name.rpartition(".")
    return bool(dot and stem and suffix)
