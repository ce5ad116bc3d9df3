"""Configuration constants, category mappings, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The category-to-directory mapping and the default
separator are plain data, not buried in logic, so both humans and coding
agents can modify them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level dicts and strings. load_library_root() provides a clear
error when the configured library directory is missing.

RULES:
- CATEGORY_DIRS maps each category to its library subdirectory
- The default separator is a markdown horizontal rule ("\\n---\\n")
- Separators read from the environment have backslash escapes decoded
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Categories: category value → library subdirectory
# ---------------------------------------------------------------------------

CATEGORY_DIRS: dict[str, str] = {
    "role": "roles",
    "platform": "platforms",
    "language": "languages",
    "tool-config": "tool-configs",
}

MODULE_SUFFIX = ".md"
"""File extension of instruction modules on disk."""

PRESETS_FILENAME = "presets.json"
"""Name of the optional preset manifest at the library root."""

# ---------------------------------------------------------------------------
# Separator handling
# ---------------------------------------------------------------------------

_ESCAPES: dict[str, str] = {
    "\\n": "\n",
    "\\t": "\t",
    "\\r": "\r",
    "\\\\": "\\",
}


def decode_separator(raw: str) -> str:
    """Decode backslash escapes in a separator given on the command line.

    WHY: Shells and .env files make it awkward to pass a literal newline,
    so users write ``--separator '\\n---\\n'``.

    HOW: Single left-to-right scan replacing the escapes in _ESCAPES.
    Unknown escapes are kept verbatim.

    RULES:
    - "\\n", "\\t", "\\r" and "\\\\" are decoded
    - Anything else passes through unchanged
    """
    out: list[str] = []
    i = 0
    while i < len(raw):
        pair = raw[i:i + 2]
        if pair in _ESCAPES:
            out.append(_ESCAPES[pair])
            i += 2
        else:
            out.append(raw[i])
            i += 1
    return "".join(out)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

BUNDLED_LIBRARY_DIR = Path(__file__).resolve().parent / "library"

INSTRUCTIONS_DIR = os.getenv("INSTRUCTIONS_DIR", str(BUNDLED_LIBRARY_DIR))
DEFAULT_SEPARATOR = decode_separator(os.getenv("INSTRUCTIONS_SEPARATOR", "\\n---\\n"))
LOG_LEVEL = os.getenv("INSTRUCTIONS_LOG_LEVEL", "WARNING").upper()


def load_library_root(path: str | Path | None = None) -> Path:
    """Resolve the instruction library root directory.

    WHY: Every lookup goes through the library root. A wrong path should
    fail once, up front, with a message that says which setting to fix.

    HOW: Uses the explicit path if given, else INSTRUCTIONS_DIR (populated
    from the environment or .env).

    RULES:
    - Raises ValueError if the directory does not exist
    - Returns an absolute path
    """
    root = Path(path or INSTRUCTIONS_DIR).expanduser().resolve()
    if not root.is_dir():
        raise ValueError(
            "Instruction library not found: {}. "
            "Set INSTRUCTIONS_DIR in the .env file or pass --library.".format(root)
        )
    return root
