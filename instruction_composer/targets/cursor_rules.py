"""Cursor project rule target (.mdc with front matter).

WHY: Cursor reads project rules from ``.cursor/rules/*.mdc``. Each rule
file starts with a YAML front matter block that tells Cursor when to
attach the rule; without ``alwaysApply: true`` the rule is only used on
request.

HOW: Prepends a fixed front matter block to the composed content. The
description lists the composed modules so the rule is recognizable in
Cursor's rule picker.

RULES:
- Front matter keys: description, globs (empty), alwaysApply: true
- The description must not contain ": " so the block stays valid YAML
- The composed content follows the closing "---" line unchanged
- Output path: ".cursor/rules/standards.mdc"
- Appending is not supported (it would repeat the front matter)
"""

from __future__ import annotations

from instruction_composer.core.models import ComposedDocument
from instruction_composer.targets.base import BaseTarget, TargetOutput


def _front_matter(document: ComposedDocument) -> str:
    if document.module_names:
        description = "Coding standards for {}".format(", ".join(document.module_names))
    else:
        description = "Coding standards"
    return "---\ndescription: {}\nglobs:\nalwaysApply: true\n---\n".format(description)


class CursorRulesTarget(BaseTarget):
    """Cursor ``.mdc`` project rule."""

    supports_append = False

    @property
    def name(self) -> str:
        return "Cursor"

    @property
    def path(self) -> str:
        return ".cursor/rules/standards.mdc"

    def render(self, document: ComposedDocument) -> TargetOutput:
        return TargetOutput(
            path=self.path,
            content=_front_matter(document) + document.content,
            media_type="text/markdown",
        )
