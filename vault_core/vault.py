"""
Vault context for vault-core.

A Vault bundles the vault root with the tag and alias catalogs built from
it. Callers own the instance and pass it to whatever needs the indexes.
"""

from pathlib import Path

from .aliases import AliasIndex, CollisionPolicy
from .config import Settings, require_vault_root
from .links import Chooser, ExternalOpener, follow_link, resolve_link
from .models import Document, LinkReference, Resolution
from .scanner import list_files
from .search import search, search_by_tag
from .tags import TagIndex, find_tags


class Vault:
    """A vault root plus its tag and alias catalogs."""

    def __init__(self, root: Path | str | None, alias_policy: CollisionPolicy = "last"):
        self.root = require_vault_root(root)
        self.tags = TagIndex()
        self.aliases = AliasIndex(alias_policy)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Vault":
        return cls(settings.vault_path, alias_policy=settings.alias_collision_policy)

    def list_files(self) -> list[Document]:
        return list_files(self.root)

    def find_tags(self, text: str) -> set[str]:
        return find_tags(text)

    def update_tags(self) -> frozenset[str]:
        return self.tags.update(self.root)

    def complete_tag(self, prefix: str) -> list[str]:
        return self.tags.complete(prefix)

    def update_aliases(self) -> None:
        self.aliases.update(self.root)

    def resolve_alias(self, name: str) -> Document | None:
        return self.aliases.resolve(name)

    def resolve_link(self, reference: LinkReference) -> Resolution:
        return resolve_link(reference, self.root)

    def follow_link(
        self,
        text: str,
        position: int,
        current: Path | None = None,
        choose: Chooser | None = None,
        open_external: ExternalOpener | None = None,
    ) -> Resolution | None:
        return follow_link(text, position, self.root, current, choose, open_external)

    def search(self, pattern: str) -> list[Path]:
        return search(pattern, self.root)

    def search_by_tag(self, tag: str) -> list[Path]:
        return search_by_tag(tag, self.root)
