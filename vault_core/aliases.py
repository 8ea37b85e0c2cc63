"""
Alias catalog for vault-core.

Aliases come from the ``alias`` and ``aliases`` front matter keys and map
an alternative name to the document that declares it.
"""

from pathlib import Path
from typing import Any, Literal

import structlog

from .frontmatter import extract_front_matter
from .models import Document
from .scanner import list_files
from .utils import FrontMatterParseError

logger = structlog.get_logger(__name__)

CollisionPolicy = Literal["last", "first"]


def collect_aliases(front_matter: dict[str, Any]) -> list[str]:
    """Combine ``alias`` and ``aliases`` into one list, dropping empty entries."""
    collected: list[Any] = []

    alias = front_matter.get("alias")
    if isinstance(alias, str):
        collected.append(alias)

    aliases = front_matter.get("aliases")
    if isinstance(aliases, str):
        collected.append(aliases)
    elif isinstance(aliases, (list, tuple)):
        collected.extend(aliases)

    return [a.strip() for a in collected if isinstance(a, str) and a.strip()]


class AliasIndex:
    """Lookup from alias string to the document that declares it.

    Documents are processed in relative-path order. With the ``last``
    policy the last declaring document owns a contested alias, with
    ``first`` the earliest one keeps it. Collisions are logged either way.
    """

    def __init__(self, policy: CollisionPolicy = "last") -> None:
        if policy not in ("last", "first"):
            raise ValueError(f"Unknown alias collision policy: {policy}")
        self.policy = policy
        self._aliases: dict[str, Document] = {}

    @property
    def aliases(self) -> dict[str, Document]:
        return dict(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def update(self, vault_root: Path | str | None) -> None:
        """Rebuild the catalog from every eligible document.

        Documents with unreadable files or malformed front matter are
        logged and skipped. The new catalog replaces the old one in a
        single assignment.
        """
        aliases: dict[str, Document] = {}
        skipped = 0

        for document in list_files(vault_root):
            try:
                front_matter = extract_front_matter(document.read_text())
            except FrontMatterParseError as e:
                logger.warning("front_matter_invalid", path=document.rel_path, error=str(e))
                skipped += 1
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("note_read_failed", path=document.rel_path, error=str(e))
                skipped += 1
                continue

            if not front_matter:
                continue

            for alias in collect_aliases(front_matter):
                owner = aliases.get(alias)
                if owner is not None and owner != document:
                    logger.warning(
                        "alias_collision",
                        alias=alias,
                        previous=owner.rel_path,
                        current=document.rel_path,
                        policy=self.policy,
                    )
                    if self.policy == "first":
                        continue
                aliases[alias] = document

        self._aliases = aliases
        logger.info("aliases_updated", aliases=len(aliases), skipped=skipped)

    def resolve(self, name: str) -> Document | None:
        """Exact-match lookup of an alias."""
        return self._aliases.get(name)
