"""
Tag extraction and the tag catalog for vault-core.
"""

from collections.abc import Iterable
from pathlib import Path

import structlog

from .scanner import list_files
from .utils import TAG_PATTERN

logger = structlog.get_logger(__name__)


def find_tags(text: str) -> set[str]:
    """Return every distinct ``#tag`` token in raw text.

    Matching is not content aware: tags inside code spans or URLs are found
    too. Case variants are kept as distinct tokens.
    """
    return set(TAG_PATTERN.findall(text))


def _capitalize_tag(tag: str) -> str:
    body = tag[1:] if tag.startswith("#") else tag
    prefix = "#" if tag.startswith("#") else ""
    return prefix + body.capitalize()


def expand_for_completion(tags: Iterable[str]) -> set[str]:
    """Expand tags with lower-case and capitalized variants.

    ``#Project-A`` yields ``#Project-A``, ``#project-a`` and ``#Project-a``.
    Expanding an already expanded set returns the same set.
    """
    expanded: set[str] = set()
    for tag in tags:
        expanded.add(tag)
        expanded.add(tag.lower())
        expanded.add(_capitalize_tag(tag))
    return expanded


class TagIndex:
    """Catalog of distinct tags across all eligible documents.

    The catalog is only ever replaced wholesale by update().
    """

    def __init__(self) -> None:
        # (tags, expanded) swapped as one reference
        self._catalog: tuple[frozenset[str], frozenset[str]] = (frozenset(), frozenset())

    @property
    def tags(self) -> frozenset[str]:
        return self._catalog[0]

    @property
    def expanded(self) -> frozenset[str]:
        return self._catalog[1]

    @property
    def base_tags(self) -> frozenset[str]:
        """Distinct tags after case folding."""
        return frozenset(tag.lower() for tag in self.tags)

    def update(self, vault_root: Path | str | None) -> frozenset[str]:
        """Re-scan every eligible document and replace the catalog.

        Unreadable documents are logged and skipped.
        """
        found: set[str] = set()
        documents = list_files(vault_root)

        for document in documents:
            try:
                text = document.read_text()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("note_read_failed", path=document.rel_path, error=str(e))
                continue
            found |= find_tags(text)

        tags = frozenset(found)
        self._catalog = (tags, frozenset(expand_for_completion(tags)))

        logger.info("tags_updated", documents=len(documents), tags=len(tags))
        return tags

    def complete(self, prefix: str) -> list[str]:
        """Return expanded tag candidates starting with ``prefix``."""
        return sorted(tag for tag in self.expanded if tag.startswith(prefix))
