"""Targets for tools that read a plain markdown instruction file.

WHY: Most assistants (Claude Code, Codex / AGENTS.md, Gemini CLI,
GitHub Copilot, Windsurf) read plain markdown with no header. They differ
only in file location.

HOW: MarkdownFileTarget implements render() once; each tool is a tiny
subclass that sets its name and path.

RULES:
- Content is written exactly as composed
- Media type: "text/markdown"
"""

from __future__ import annotations

from instruction_composer.core.models import ComposedDocument
from instruction_composer.targets.base import BaseTarget, TargetOutput


class MarkdownFileTarget(BaseTarget):
    """Target that writes the composed document unchanged."""

    tool_name = ""
    default_path = ""

    @property
    def name(self) -> str:
        return self.tool_name

    @property
    def path(self) -> str:
        return self.default_path

    def render(self, document: ComposedDocument) -> TargetOutput:
        return TargetOutput(
            path=self.path,
            content=document.content,
            media_type="text/markdown",
        )


class ClaudeTarget(MarkdownFileTarget):
    tool_name = "Claude Code"
    default_path = "CLAUDE.md"


class AgentsTarget(MarkdownFileTarget):
    tool_name = "AGENTS.md (Codex and compatible agents)"
    default_path = "AGENTS.md"


class GeminiTarget(MarkdownFileTarget):
    tool_name = "Gemini CLI"
    default_path = "GEMINI.md"


class CopilotTarget(MarkdownFileTarget):
    tool_name = "GitHub Copilot"
    default_path = ".github/copilot-instructions.md"


class WindsurfTarget(MarkdownFileTarget):
    tool_name = "Windsurf"
    default_path = ".windsurfrules"
