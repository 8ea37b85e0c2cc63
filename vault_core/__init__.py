# vault-core
#
# Modular package structure:
# - config.py: Settings and vault root validation
# - logging.py: structlog configuration
# - utils.py: Exceptions, regex patterns, and path helpers
# - models.py: Document, link reference, and resolution models
# - scanner.py: Vault traversal and document eligibility
# - frontmatter.py: Front matter extraction
# - tags.py: Tag extraction and the tag catalog
# - aliases.py: Alias catalog
# - links.py: Link parsing and resolution
# - search.py: Regex and tag search
# - vault.py: Caller-owned vault context
# - tools.py: MCP tool handlers and server instance
# - main.py: Entry point and server initialization
