"""Shared test fixtures for the instruction_composer test suite.

WHY: Most test modules need the same small instruction library on disk
and the same two in-memory modules from the reference scenario
("# A\\ncontent A" and "# B\\ncontent B"). Centralizing them here keeps
the expected outputs consistent across modules.

HOW: ``library_root`` writes a throwaway library into tmp_path with one
module per category, a name that exists in two categories, and a
presets.json. ``module_a`` / ``module_b`` are plain InstructionModules.

RULES:
- All file I/O goes through tmp_path; the bundled library
  is only read, never written
- Module content has no trailing newline so joins are easy to read
"""

import json
from pathlib import Path

import pytest

from instruction_composer.core.library import ModuleLibrary
from instruction_composer.core.models import InstructionModule

SEP = "\n---\n"

LIBRARY_FILES = {
    "roles/data-engineer.md": "# Data Engineer\nBuild idempotent pipelines.",
    "roles/reviewer.md": "# Reviewer\nReview for correctness first.",
    "platforms/databricks.md": "# Databricks\nUse Unity Catalog names.",
    "languages/python.md": "# Python\nUse type hints.",
    "languages/sql.md": "# SQL\nNo SELECT *.",
    "tool-configs/hierarchy.md": "# Hierarchy\nProject-level instructions take precedence.",
    # Same name in two categories, for ambiguity tests
    "roles/shared.md": "# Shared role",
    "tool-configs/shared.md": "# Shared tool config",
}

PRESETS = {
    "presets": {
        "data": {
            "description": "Data engineer on Databricks",
            "modules": ["role/data-engineer", "platform/databricks", "python"],
        },
        "plain": {
            "modules": ["language/sql", "language/python"],
            "separator": "\n\n",
        },
    }
}


def write_library(root: Path, files: dict, presets: dict = None) -> Path:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
    if presets is not None:
        (root / "presets.json").write_text(json.dumps(presets), encoding="utf-8")
    return root


@pytest.fixture
def library_root(tmp_path):
    """A populated instruction library with presets."""
    return write_library(tmp_path / "library", LIBRARY_FILES, PRESETS)


@pytest.fixture
def library(library_root):
    return ModuleLibrary(library_root)


@pytest.fixture
def module_a():
    return InstructionModule(name="a", content="# A\ncontent A", category="role")


@pytest.fixture
def module_b():
    return InstructionModule(name="b", content="# B\ncontent B", category="language")
