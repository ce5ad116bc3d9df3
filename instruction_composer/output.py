"""Write composed instructions to disk.

WHY: The composer itself is pure. Callers (the CLI) still need to save
the result where an AI tool will find it, either replacing the file or
appending to it the way ``cat module.md >> CLAUDE.md`` does.

HOW: write_document() creates parent directories, then writes or appends
UTF-8 text with newline translation off, so the bytes on disk match the
composed text.

RULES:
- mode "overwrite" replaces the file; mode "append" adds to it
- When appending to a non-empty file the separator is written first
- Parent directories are created as needed
- OSError is raised as IOFailure
"""

from __future__ import annotations

import logging
from pathlib import Path

from instruction_composer.config import DEFAULT_SEPARATOR
from instruction_composer.core.errors import IOFailure

logger = logging.getLogger(__name__)

WRITE_MODES = ("overwrite", "append")


def write_document(
    content: str,
    path: str | Path,
    mode: str = "overwrite",
    separator: str = DEFAULT_SEPARATOR,
) -> Path:
    """Save text to ``path``.

    Args:
        content: The text to write.
        path: Destination file.
        mode: "overwrite" or "append".
        separator: Inserted before ``content`` when appending to a
            non-empty file.

    Returns:
        The path written.

    Raises:
        ValueError: For an unknown mode.
        IOFailure: If the directory or file cannot be written.
    """
    if mode not in WRITE_MODES:
        raise ValueError("Unknown write mode '{}'. Use one of: {}".format(
            mode, ", ".join(WRITE_MODES)
        ))

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        if mode == "append":
            needs_separator = target.is_file() and target.stat().st_size > 0
            with open(target, "a", encoding="utf-8", newline="") as f:
                if needs_separator:
                    f.write(separator)
                f.write(content)
        else:
            with open(target, "w", encoding="utf-8", newline="") as f:
                f.write(content)
    except OSError as exc:
        raise IOFailure(target, exc.strerror or str(exc)) from exc

    logger.info("Wrote %d chars to %s (%s)", len(content), target, mode)
    return target
