"""Abstract base target and output container.

WHY: Each AI coding tool reads its instructions from its own conventional
location (CLAUDE.md, .github/copilot-instructions.md, ...), and a few
expect a small header. This base class gives the CLI one interface for
all of them.

HOW: BaseTarget is an ABC with ``name``, ``path`` and ``render()``.
TargetOutput is a plain dataclass bundling the relative output path with
the text to write and its MIME type.

RULES:
- ``path`` is relative to the project directory, using "/" separators
- ``render()`` must never alter the composed content itself; targets may
  only add their own header
- The caller is responsible for writing TargetOutput to disk
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from instruction_composer.core.models import ComposedDocument


@dataclass
class TargetOutput:
    """One file produced for a target.

    Attributes:
        path: Output path relative to the project directory,
              e.g. ``".github/copilot-instructions.md"``.
        content: The text to write.
        media_type: MIME type for the content, e.g. ``"text/markdown"``.
    """

    path: str
    content: str
    media_type: str


class BaseTarget(ABC):
    """Abstract base for all AI tool targets.

    To add a new AI tool:
    1. Create a new file in targets/ (or reuse MarkdownFileTarget)
    2. Subclass BaseTarget
    3. Implement name, path and render()
    4. Register in TARGETS dict in targets/__init__.py
    """

    supports_append = True
    """False for targets whose header would be duplicated by appending."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable tool name, e.g. 'GitHub Copilot'."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Default output path relative to the project directory."""

    @abstractmethod
    def render(self, document: ComposedDocument) -> TargetOutput:
        """Wrap a composed document for this tool.

        Args:
            document: The composed instructions.

        Returns:
            A TargetOutput with the default path and the text to write.
        """
