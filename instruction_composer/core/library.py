"""On-disk instruction module library.

WHY: Modules live as markdown files grouped by category
(``roles/data-engineer.md``, ``languages/python.md``). Callers refer to
them by name, optionally qualified by category, and need either the exact
file content or a clear error.

HOW: ModuleLibrary wraps a root directory. parse_ref() turns user text
into a ModuleRef, find() maps a ref to a file path by naming convention,
load() reads the file into an InstructionModule.

RULES:
- Layout: <root>/<category-dir>/<name>.md (see config.CATEGORY_DIRS)
- A bare name must match exactly one category, else AmbiguousModule
- Names must match NAME_PATTERN so refs cannot escape the root
- Files are read as UTF-8 with newline translation disabled
- Read failures are raised as IOFailure, never masked
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

from instruction_composer.config import CATEGORY_DIRS, MODULE_SUFFIX
from instruction_composer.core.errors import AmbiguousModule, IOFailure, ModuleNotFound
from instruction_composer.core.models import InstructionModule, ModuleRef

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*\Z")

# Directory names are accepted as category aliases ("roles" → "role")
_CATEGORY_ALIASES = {d: c for c, d in CATEGORY_DIRS.items()}


def normalize_category(text: str) -> str:
    """Return the category value for a category or directory name.

    Raises ValueError for anything that is neither.
    """
    key = text.strip().lower()
    if key in CATEGORY_DIRS:
        return key
    if key in _CATEGORY_ALIASES:
        return _CATEGORY_ALIASES[key]
    raise ValueError(
        "Unknown category '{}'. Available: {}".format(text, ", ".join(CATEGORY_DIRS))
    )


def parse_ref(text: str) -> ModuleRef:
    """Parse ``category/name`` or ``name`` into a ModuleRef.

    WHY: The CLI and preset manifests accept refs as plain strings.

    HOW: Split on the first "/". The category part may be a category value
    ("role") or its directory ("roles"). A trailing ".md" is dropped from
    the name so tab-completed file names work.

    RULES:
    - Blank text raises ValueError
    - Unknown category prefix raises ModuleNotFound
    - Names not matching NAME_PATTERN raise ModuleNotFound
    """
    raw = text.strip()
    if not raw:
        raise ValueError("Empty module reference")

    category: Optional[str] = None
    name = raw
    if "/" in raw:
        prefix, name = raw.split("/", 1)
        try:
            category = normalize_category(prefix)
        except ValueError:
            raise ModuleNotFound(raw, searched=list(CATEGORY_DIRS.values())) from None

    if name.endswith(MODULE_SUFFIX):
        name = name[: -len(MODULE_SUFFIX)]

    if not NAME_PATTERN.fullmatch(name):
        raise ModuleNotFound(raw)

    return ModuleRef(name=name, category=category)


class ModuleLibrary:
    """A directory tree of instruction modules, addressed by category and name.

    WHY: Keeps every filesystem concern (layout, lookup, decoding) in one
    place so composition stays a pure function over loaded modules.

    HOW: Stateless apart from the root path; every call looks at the
    filesystem afresh, since module content is static and cheap to read.

    RULES:
    - Missing category directories are treated as empty
    - available() is sorted by category order, then name
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def category_dir(self, category: str) -> Path:
        return self.root / CATEGORY_DIRS[category]

    def available(self, category: Optional[str] = None) -> List[ModuleRef]:
        """List every module in the library, optionally for one category."""
        categories = [category] if category else list(CATEGORY_DIRS)
        refs: List[ModuleRef] = []
        for cat in categories:
            directory = self.category_dir(cat)
            if not directory.is_dir():
                continue
            for path in sorted(directory.glob("*" + MODULE_SUFFIX)):
                name = path.name[: -len(MODULE_SUFFIX)]
                if not path.is_file() or not NAME_PATTERN.fullmatch(name):
                    logger.debug("Skipping non-module file %s", path)
                    continue
                refs.append(ModuleRef(name=name, category=cat))
        return refs

    def find(self, ref: ModuleRef) -> ModuleRef:
        """Resolve a ref to a fully qualified ref whose file exists.

        RULES:
        - Qualified refs look only in their own category directory
        - Bare refs search all categories and need exactly one hit
        - Names not matching NAME_PATTERN raise ModuleNotFound
        """
        if not NAME_PATTERN.fullmatch(ref.name):
            raise ModuleNotFound(str(ref))
        if ref.category:
            if ref.category not in CATEGORY_DIRS:
                raise ModuleNotFound(str(ref))
            if self._module_path(ref.category, ref.name).is_file():
                return ref
            raise ModuleNotFound(str(ref), searched=[CATEGORY_DIRS[ref.category]])

        matches = [
            ModuleRef(name=ref.name, category=cat)
            for cat in CATEGORY_DIRS
            if self._module_path(cat, ref.name).is_file()
        ]
        if not matches:
            raise ModuleNotFound(ref.name, searched=list(CATEGORY_DIRS.values()))
        if len(matches) > 1:
            raise AmbiguousModule(ref.name, [str(m) for m in matches])
        return matches[0]

    def load(self, ref: ModuleRef) -> InstructionModule:
        """Read one module from disk.

        WHY: Composition must reproduce module text exactly, including
        CRLF line endings and trailing newlines, so the file is read with
        newline translation off.

        RULES:
        - Raises ModuleNotFound / AmbiguousModule from find()
        - Raises IOFailure for any other read or decode failure
        """
        resolved = self.find(ref)
        path = self._module_path(resolved.category, resolved.name)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except UnicodeDecodeError as exc:
            raise IOFailure(path, "not valid UTF-8 ({})".format(exc.reason)) from exc
        except OSError as exc:
            raise IOFailure(path, exc.strerror or str(exc)) from exc

        logger.debug("Loaded %s (%d chars) from %s", resolved, len(content), path)
        return InstructionModule(
            name=resolved.name,
            content=content,
            category=resolved.category,
            path=path,
        )

    def load_all(self, refs: Iterable[ModuleRef]) -> List[InstructionModule]:
        """Load refs in order, failing on the first one that cannot be read."""
        return [self.load(ref) for ref in refs]

    def _module_path(self, category: str, name: str) -> Path:
        return self.category_dir(category) / "{}{}".format(name, MODULE_SUFFIX)
