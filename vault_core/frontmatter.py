"""
Front matter extraction for vault-core.

A front matter block starts at offset 0 with ``---`` and ends at the next
``---``. Its body is parsed as a YAML mapping.
"""

from typing import Any

import yaml

from .utils import FRONTMATTER_DELIMITER, FrontMatterParseError


def parse_front_matter_block(block: str) -> dict[str, Any]:
    """Parse the text between the two delimiters as a YAML mapping.

    Raises:
        FrontMatterParseError: If the block is invalid YAML or not a mapping
    """
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontMatterParseError(f"Invalid front matter: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterParseError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return data


def extract_front_matter(text: str) -> dict[str, Any] | None:
    """Extract the front matter mapping from document text.

    Returns None when the text does not start with ``---`` or the block is
    never closed. Only the first two delimiters are consulted, so a later
    ``---`` in the body does not interfere.

    Raises:
        FrontMatterParseError: If the block exists but cannot be parsed
    """
    if not text.startswith(FRONTMATTER_DELIMITER):
        return None

    parts = text.split(FRONTMATTER_DELIMITER, 2)
    if len(parts) != 3:
        return None

    return parse_front_matter_block(parts[1])
