"""
MCP Tools module for vault-core.

Contains the MCP tool handlers (list_tools and call_tool).
"""

from typing import Any

import structlog
from mcp.server import Server
from mcp.types import TextContent, Tool

from .config import settings
from .links import find_links
from .models import Disambiguation, ExternalLink, LinkReference, NotFound, Resolved
from .utils import VaultError
from .vault import Vault

logger = structlog.get_logger(__name__)

# Initialize server
server = Server("vault-core")

_vault: Vault | None = None


def get_vault() -> Vault:
    """Return the server's vault, creating it from settings on first use."""
    global _vault
    if _vault is None:
        _vault = Vault.from_settings(settings)
    return _vault


def _text(message: str) -> list[TextContent]:
    return [TextContent(type="text", text=message)]


def _parse_reference(link: str) -> LinkReference:
    """Parse ``[[...]]`` or ``[..](..)`` text; anything else is a bare wiki target."""
    found = find_links(link)
    if found:
        return found[0]
    return LinkReference(kind="wiki", target=link.strip())


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="vault_list_files",
            description="List every eligible note in the vault (relative paths).",
            inputSchema={"type": "object", "properties": {}}
        ),
        Tool(
            name="vault_find_tags",
            description="Extract the #tags contained in a piece of text.",
            inputSchema={
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "Text to scan for tags"}
                },
                "required": ["text"]
            }
        ),
        Tool(
            name="vault_update_tags",
            description="Rescan the vault and rebuild the tag catalog.",
            inputSchema={"type": "object", "properties": {}}
        ),
        Tool(
            name="vault_complete_tag",
            description="Return tag candidates (including case variants) starting with a prefix.",
            inputSchema={
                "type": "object",
                "properties": {
                    "prefix": {"type": "string", "description": "Tag prefix, e.g. '#proj'"}
                },
                "required": ["prefix"]
            }
        ),
        Tool(
            name="vault_update_aliases",
            description="Rescan the vault and rebuild the alias catalog from front matter.",
            inputSchema={"type": "object", "properties": {}}
        ),
        Tool(
            name="vault_resolve_alias",
            description="Find the note that declares an alias.",
            inputSchema={
                "type": "object",
                "properties": {
                    "alias": {"type": "string", "description": "Alias to look up (exact match)"}
                },
                "required": ["alias"]
            }
        ),
        Tool(
            name="vault_resolve_link",
            description="Resolve a wiki link ([[target]]), markdown link ([text](target)) "
                       "or bare target to the matching note(s).",
            inputSchema={
                "type": "object",
                "properties": {
                    "link": {"type": "string", "description": "Link text or bare target"}
                },
                "required": ["link"]
            }
        ),
        Tool(
            name="vault_search",
            description="Case-insensitive regex search across notes. Returns matching note paths.",
            inputSchema={
                "type": "object",
                "properties": {
                    "pattern": {"type": "string", "description": "Regular expression"}
                },
                "required": ["pattern"]
            }
        ),
        Tool(
            name="vault_search_by_tag",
            description="Find notes containing a tag.",
            inputSchema={
                "type": "object",
                "properties": {
                    "tag": {"type": "string", "description": "Tag including the leading #"}
                },
                "required": ["tag"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        return _dispatch(name, arguments)
    except VaultError as e:
        logger.warning("tool_failed", tool=name, error=str(e))
        return _text(f"Error: {e}")


def _dispatch(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    vault = get_vault()

    if name == "vault_list_files":
        documents = vault.list_files()
        if not documents:
            return _text("No notes found in vault")
        return _text("\n".join(doc.rel_path for doc in documents))

    elif name == "vault_find_tags":
        tags = vault.find_tags(arguments.get("text", ""))
        if not tags:
            return _text("No tags found")
        return _text("\n".join(sorted(tags)))

    elif name == "vault_update_tags":
        tags = vault.update_tags()
        return _text(f"Indexed {len(tags)} tags")

    elif name == "vault_complete_tag":
        candidates = vault.complete_tag(arguments.get("prefix", ""))
        if not candidates:
            return _text("No matching tags")
        return _text("\n".join(candidates))

    elif name == "vault_update_aliases":
        vault.update_aliases()
        return _text(f"Indexed {len(vault.aliases)} aliases")

    elif name == "vault_resolve_alias":
        alias = arguments.get("alias", "")
        document = vault.resolve_alias(alias)
        if document is None:
            return _text(f"No note found for alias: '{alias}'")
        return _text(document.rel_path)

    elif name == "vault_resolve_link":
        link = arguments.get("link", "")
        result = vault.resolve_link(_parse_reference(link))

        if isinstance(result, Resolved):
            return _text(result.document.rel_path)
        if isinstance(result, ExternalLink):
            return _text(f"External link: {result.url}")
        if isinstance(result, NotFound):
            return _text(f"No note found for link: '{result.target}'")
        if isinstance(result, Disambiguation):
            output = f"Found {len(result.candidates)} notes matching '{result.target}':\n\n"
            for doc in result.candidates:
                output += f"- {doc.rel_path}\n"
            return _text(output)

    elif name == "vault_search":
        pattern = arguments.get("pattern", "")
        paths = vault.search(pattern)
        if not paths:
            return _text(f"No notes found for pattern: '{pattern}'")
        return _text("\n".join(str(p) for p in paths))

    elif name == "vault_search_by_tag":
        tag = arguments.get("tag", "")
        paths = vault.search_by_tag(tag)
        if not paths:
            return _text(f"No notes found with tag: '{tag}'")
        return _text("\n".join(str(p) for p in paths))

    return _text(f"Unknown tool: {name}")
