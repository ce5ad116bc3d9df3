"""Compose instruction modules into a single document.

WHY: AI coding assistants read one instruction file. Projects pick the
modules that apply to them (a role, a platform, a language, a tool
configuration) and need them joined in exactly the order chosen.

HOW: compose() is a pure join of module content with a separator.
compose_request() resolves a CompositionRequest against a ModuleLibrary
first, so every module is loaded before anything is joined.

RULES:
- Output = separator.join(contents), in request order, nothing else
- One module yields its content unchanged (no leading/trailing separator)
- An empty separator is valid
- An empty module list raises EmptyRequest
- No reordering, deduplication, or conflict resolution
- No filesystem writes; saving the result is the caller's job
"""

from __future__ import annotations

import logging
from typing import Sequence

from instruction_composer.config import DEFAULT_SEPARATOR
from instruction_composer.core.errors import EmptyRequest
from instruction_composer.core.library import ModuleLibrary
from instruction_composer.core.models import (
    ComposedDocument,
    CompositionRequest,
    InstructionModule,
)

logger = logging.getLogger(__name__)


def compose(
    modules: Sequence[InstructionModule],
    separator: str = DEFAULT_SEPARATOR,
) -> ComposedDocument:
    """Join module content in order with ``separator`` between each pair.

    Args:
        modules: Non-empty ordered sequence of modules.
        separator: Text inserted between consecutive modules.

    Returns:
        A new ComposedDocument.

    Raises:
        EmptyRequest: If ``modules`` is empty.
    """
    if not modules:
        raise EmptyRequest("Nothing to compose: no modules were requested")

    content = separator.join(module.content for module in modules)
    names = tuple(module.qualified_name for module in modules)
    logger.info("Composed %d module(s) into %d chars", len(modules), len(content))
    return ComposedDocument(content=content, module_names=names)


def compose_request(request: CompositionRequest, library: ModuleLibrary) -> ComposedDocument:
    """Resolve and compose a request against a library.

    RULES:
    - Every ref is loaded before joining; the first bad ref aborts
    - An empty request raises EmptyRequest without touching the library
    """
    if not request.refs:
        raise EmptyRequest("Nothing to compose: no modules were requested")
    modules = library.load_all(request.refs)
    return compose(modules, request.separator)
