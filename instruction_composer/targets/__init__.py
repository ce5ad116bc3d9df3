"""Output target registry — one entry per AI coding tool.

WHY: The CLI needs a single lookup to find where a given tool expects its
instructions. A central dict makes it trivial to add a tool: create the
target class, import it here, add one line.

HOW: TARGETS maps string keys to target *classes* (not instances).
Callers instantiate as needed: ``target = TARGETS["copilot"]()``.

RULES:
- Keys are short lowercase identifiers (used in the --target flag)
- Values are BaseTarget subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from instruction_composer.targets.cursor_rules import CursorRulesTarget
from instruction_composer.targets.markdown_file import (
    AgentsTarget,
    ClaudeTarget,
    CopilotTarget,
    GeminiTarget,
    WindsurfTarget,
)

if TYPE_CHECKING:
    from instruction_composer.targets.base import BaseTarget

TARGETS: dict[str, type[BaseTarget]] = {
    "claude": ClaudeTarget,
    "agents": AgentsTarget,
    "gemini": GeminiTarget,
    "copilot": CopilotTarget,
    "cursor": CursorRulesTarget,
    "windsurf": WindsurfTarget,
}
