"""
Link parsing and resolution for vault-core.

Two link syntaxes are recognised:

- wiki links: ``[[target]]`` or ``[[target|description]]``
- markdown links: ``[description](target)``

Resolution maps a link target onto the eligible documents of a vault by
path-suffix matching. Several matches produce a Disambiguation that the
caller settles through an injected chooser; the resolver never prompts.
"""

from collections.abc import Callable
from pathlib import Path

import structlog

from .models import (
    Disambiguation,
    Document,
    ExternalLink,
    LinkReference,
    NotFound,
    Resolution,
    Resolved,
)
from .scanner import list_files
from .utils import (
    MARKDOWN_LINK_PATTERN,
    NOTE_EXTENSION,
    WIKILINK_PATTERN,
    has_extension,
)

logger = structlog.get_logger(__name__)

Chooser = Callable[[list[Document]], Document | None]
ExternalOpener = Callable[[str], None]


# ============== Parsing ==============

def find_links(text: str) -> list[LinkReference]:
    """Return every wiki and markdown link in ``text`` ordered by offset."""
    links: list[LinkReference] = []

    for m in WIKILINK_PATTERN.finditer(text):
        links.append(LinkReference(
            kind="wiki",
            target=m.group(1).strip(),
            description=m.group(2).strip() if m.group(2) else None,
            start=m.start(),
            end=m.end(),
        ))

    for m in MARKDOWN_LINK_PATTERN.finditer(text):
        # [[a]](b) is a wiki link followed by text, not a markdown link
        if any(link.start <= m.start() < link.end for link in links if link.kind == "wiki"):
            continue
        links.append(LinkReference(
            kind="markdown",
            target=m.group(2).strip(),
            description=m.group(1) or None,
            start=m.start(),
            end=m.end(),
        ))

    links.sort(key=lambda link: link.start)
    return links


def parse_link_at(text: str, position: int) -> LinkReference | None:
    """Return the link spanning ``position`` in ``text``, if any.

    Wiki links win when both syntaxes span the position.
    """
    spanning = [link for link in find_links(text) if link.start <= position < link.end]
    if not spanning:
        return None
    spanning.sort(key=lambda link: link.kind != "wiki")
    return spanning[0]


# ============== Resolution ==============

def normalize_target(target: str, kind: str = "wiki") -> str:
    """Normalize a link target for matching.

    ``%20`` becomes a space. Wiki targets without an extension get ``.md``
    appended; markdown targets are expected to carry their own extension.
    """
    normalized = target.replace("%20", " ")
    if kind == "wiki" and not has_extension(normalized):
        normalized = f"{normalized}.{NOTE_EXTENSION}"
    return normalized


def is_external(target: str) -> bool:
    return ":" in target.replace("%20", " ")


def match_documents(target: str, documents: list[Document]) -> list[Document]:
    """Select documents whose relative path ends with ``target``.

    This is a plain suffix match: ``a.md`` matches ``notes/a.md`` and also
    ``data.md``. Partial paths such as ``notes/a.md`` narrow the match.
    """
    target = target.lstrip("/")
    return [doc for doc in documents if doc.rel_path.endswith(target)]


def resolve_link(reference: LinkReference, vault_root: Path | str | None) -> Resolution:
    """Resolve a link reference against the current file set of the vault.

    Targets containing a colon are external and are never matched against
    the file system.

    Raises:
        ConfigurationError: If the vault root is unset or missing
    """
    if is_external(reference.target):
        return ExternalLink(url=reference.target)

    target = normalize_target(reference.target, reference.kind)
    matches = match_documents(target, list_files(vault_root))

    if not matches:
        logger.debug("link_not_found", target=target)
        return NotFound(target=target)
    if len(matches) == 1:
        logger.debug("link_resolved", target=target, path=matches[0].rel_path)
        return Resolved(document=matches[0])

    logger.debug("link_ambiguous", target=target, candidates=len(matches))
    return Disambiguation(target=target, candidates=matches)


def _same_file(document: Document, current: Path) -> bool:
    try:
        return document.path.resolve() == Path(current).resolve()
    except OSError:
        return False


def follow_link(
    text: str,
    position: int,
    vault_root: Path | str | None,
    current: Path | None = None,
    choose: Chooser | None = None,
    open_external: ExternalOpener | None = None,
) -> Resolution | None:
    """Resolve the link under ``position`` the way an editor command would.

    Args:
        text: Full text of the document being edited
        position: Offset of the cursor in ``text``
        vault_root: Vault root directory
        current: Path of the document being edited, if it has one
        choose: Strategy picking one candidate from a Disambiguation
        open_external: Callback receiving external URLs

    Returns:
        None when there is no followable link at ``position``, otherwise the
        resolution. A Disambiguation settled by ``choose`` comes back as
        Resolved.
    """
    reference = parse_link_at(text, position)
    if reference is None:
        return None

    result = resolve_link(reference, vault_root)

    if isinstance(result, ExternalLink):
        if open_external is not None:
            open_external(result.url)
        return result

    # A wiki link to the document itself is not a followable link
    if (
        reference.kind == "wiki"
        and current is not None
        and isinstance(result, Resolved)
        and _same_file(result.document, current)
    ):
        return None

    if isinstance(result, Disambiguation) and choose is not None:
        choice = choose(list(result.candidates))
        if choice is None:
            return result
        if choice not in result.candidates:
            raise ValueError(f"Chosen document is not a candidate: {choice.rel_path}")
        return Resolved(document=choice)

    return result
