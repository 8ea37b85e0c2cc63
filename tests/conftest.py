"""
Pytest configuration and fixtures for vault-core tests.
"""

import pytest
from pathlib import Path


@pytest.fixture
def temp_vault(tmp_path: Path):
    """Create a temporary vault with test notes."""
    vault_path = tmp_path / "vault"
    vault_path.mkdir()

    # Create folder structure
    for folder in ("Concepts", "References", "notes", "archive", ".trash", "drafts", "assets"):
        (vault_path / folder).mkdir()

    # Note 1: Concept with alias and aliases
    (vault_path / "Concepts" / "Python.md").write_text("""---
title: Python
alias: snake
aliases:
  - py
  - python3
  - ""
---

# Python

A #programming language. See [[JavaScript]] and [[Python]].
""", encoding="utf-8")

    # Note 2: Concept with flow-style aliases and both link syntaxes
    (vault_path / "Concepts" / "JavaScript.md").write_text("""---
aliases: [js, ecmascript]
---

Runs in the browser. Links to [[Python|the Python language]] and [Docker](References/Docker.md).
#programming #Web
""", encoding="utf-8")

    # Note 3: No front matter
    (vault_path / "References" / "Docker.md").write_text("""# Docker

Container platform. #devops/containers
""", encoding="utf-8")

    # Notes 4 and 5: same file name in two folders, same alias
    (vault_path / "notes" / "a.md").write_text("""---
alias: shared
---
First a. #project-a
""", encoding="utf-8")
    (vault_path / "archive" / "a.md").write_text("""---
alias: shared
---
Archived a. #Project-A
""", encoding="utf-8")

    # Note 6: Space in the file name
    (vault_path / "notes" / "My Note.md").write_text("Spaces in the name.\n", encoding="utf-8")

    # Note 7: Name ending in "a.md" without being a.md
    (vault_path / "data.md").write_text("Unrelated data note.\n", encoding="utf-8")

    # Note 8: Invalid front matter
    (vault_path / "invalid_frontmatter.md").write_text("""---
title: [invalid yaml
alias: broken
---

Body with #broken tag.
""", encoding="utf-8")

    # Note 9: Front matter never closed
    (vault_path / "unterminated.md").write_text("""---
alias: ghost
No closing delimiter.
""", encoding="utf-8")

    # Excluded: trash, temp file, non-markdown files
    (vault_path / ".trash" / "Old.md").write_text("""---
alias: trashed
---
#trashed
""", encoding="utf-8")
    (vault_path / "drafts" / "scratch~.md").write_text("#temp draft\n", encoding="utf-8")
    (vault_path / "notes" / "readme.txt").write_text("#txt\n", encoding="utf-8")
    (vault_path / "assets" / "diagram.png").write_bytes(b"\x89PNG\r\n")

    yield vault_path.resolve()


@pytest.fixture
def vault(temp_vault):
    """Create a Vault instance over the temp vault."""
    from vault_core.vault import Vault
    return Vault(temp_vault)


@pytest.fixture
def patched_vault(vault, monkeypatch):
    """Patch the MCP server's vault to use the temp vault."""
    from vault_core import tools

    monkeypatch.setattr(tools, "_vault", vault)
    return vault
