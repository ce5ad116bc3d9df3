"""Instruction Composer — builds AI coding assistant instruction files.

WHY: Coding-standard guidance is kept as small markdown modules, one per
role, platform, language, or tool configuration. AI coding assistants
read a single file, so the modules a project needs have to be stitched
together in a chosen order.

HOW: Three stages — resolve (module library), compose (pure join), and
write (pluggable per-tool targets). Each stage is independently testable.

RULES:
- Composition is pure, order-preserving concatenation
- Module content is never altered, reordered, or deduplicated
- Adding a new AI tool = one new target class, no core changes
"""

__version__ = "0.1.0"
