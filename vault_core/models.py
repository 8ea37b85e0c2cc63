"""
Pydantic models for vault-core.

Contains data models for documents, parsed link references, and link resolution results.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Document(BaseModel):
    """An eligible markdown document in the vault.

    Only identity is stored; content is read from disk on every call.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    rel_path: str
    extension: str

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")


class LinkReference(BaseModel):
    """A link found in document text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["wiki", "markdown"]
    target: str
    description: str | None = None
    start: int = 0
    end: int = 0


class Resolved(BaseModel):
    """A link target matched exactly one document."""

    kind: Literal["resolved"] = "resolved"
    document: Document


class Disambiguation(BaseModel):
    """A link target matched several documents; the caller must pick one."""

    kind: Literal["disambiguation"] = "disambiguation"
    target: str
    candidates: list[Document]


class NotFound(BaseModel):
    """A link target matched no document."""

    kind: Literal["not_found"] = "not_found"
    target: str


class ExternalLink(BaseModel):
    """A link target that points outside the vault (contains a colon)."""

    kind: Literal["external"] = "external"
    url: str


Resolution = Resolved | Disambiguation | NotFound | ExternalLink
