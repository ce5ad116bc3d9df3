"""Dataclasses for instruction modules and compositions.

WHY: The library, composer, presets, and targets all pass modules and
documents around. A small set of immutable types keeps that contract
explicit and makes it impossible for composition to mutate its input.

HOW: Four frozen dataclasses:
  ModuleRef          — a caller's reference to a module (name + category)
  InstructionModule  — a named block of text with its category
  CompositionRequest — ordered refs plus the separator to join with
  ComposedDocument   — the joined text and the names it came from

RULES:
- All types are frozen; sequences are stored as tuples
- category is organizational only; it never changes composition
- ComposedDocument is a fresh value for every composition
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from instruction_composer.config import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class ModuleRef:
    """Reference to an instruction module by name and optional category.

    RULES:
    - category None means "search every category"
    - str() gives the qualified form ("role/data-engineer") when known
    """

    name: str
    category: Optional[str] = None

    def __str__(self) -> str:
        if self.category:
            return "{}/{}".format(self.category, self.name)
        return self.name


@dataclass(frozen=True)
class InstructionModule:
    """A named block of markdown guidance.

    Attributes:
        name: Module identifier, e.g. ``"data-engineer"`` or ``"python"``.
        content: Raw text, exactly as stored.
        category: One of the keys of ``config.CATEGORY_DIRS``.
        path: Backing file, or None for modules built in memory.
    """

    name: str
    content: str
    category: str
    path: Optional[Path] = field(default=None, compare=False)

    @property
    def qualified_name(self) -> str:
        return "{}/{}".format(self.category, self.name)


@dataclass(frozen=True)
class CompositionRequest:
    """An ordered selection of modules and the separator between them."""

    refs: Tuple[ModuleRef, ...]
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store a tuple
        object.__setattr__(self, "refs", tuple(self.refs))


@dataclass(frozen=True)
class ComposedDocument:
    """The result of a composition.

    Attributes:
        content: The concatenated module content.
        module_names: Qualified names of the source modules, in order.
    """

    content: str
    module_names: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.content
