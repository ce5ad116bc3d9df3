"""Named composition presets stored alongside the module library.

WHY: Most projects reuse the same handful of module combinations (e.g.
"data engineer writing Python on Databricks"). A preset stores that
ordered selection under a short name so callers don't retype it.

HOW: ``<library>/presets.json`` holds a ``presets`` object mapping names
to ``{"description", "modules", "separator"}``. The file is validated
against PRESETS_SCHEMA with jsonschema before use.

RULES:
- A missing presets.json means "no presets", not an error
- An invalid file raises PresetError naming the offending location
- modules is a non-empty list of refs ("role/data-engineer" or "python")
- separator is optional; the configured default applies otherwise
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

import jsonschema

from instruction_composer.config import DEFAULT_SEPARATOR, PRESETS_FILENAME
from instruction_composer.core.errors import IOFailure, PresetError
from instruction_composer.core.library import NAME_PATTERN, parse_ref
from instruction_composer.core.models import CompositionRequest

logger = logging.getLogger(__name__)

PRESETS_SCHEMA: Dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["presets"],
    "additionalProperties": False,
    "properties": {
        "presets": {
            "type": "object",
            "propertyNames": {"pattern": NAME_PATTERN.pattern},
            "additionalProperties": {
                "type": "object",
                "required": ["modules"],
                "additionalProperties": False,
                "properties": {
                    "description": {"type": "string"},
                    "modules": {
                        "type": "array",
                        "minItems": 1,
                        "items": {"type": "string", "minLength": 1},
                    },
                    "separator": {"type": "string"},
                },
            },
        },
    },
}


@dataclass(frozen=True)
class Preset:
    """One named, stored composition request."""

    name: str
    modules: Tuple[str, ...]
    description: str = ""
    separator: Optional[str] = None

    def to_request(self, separator: Optional[str] = None) -> CompositionRequest:
        """Build a CompositionRequest; an explicit separator wins over the preset's."""
        if separator is None:
            separator = self.separator if self.separator is not None else DEFAULT_SEPARATOR
        refs = tuple(parse_ref(text) for text in self.modules)
        return CompositionRequest(refs=refs, separator=separator)


def load_presets(root: str | Path) -> Dict[str, Preset]:
    """Load and validate the preset manifest from a library root.

    Args:
        root: Library root directory.

    Returns:
        Mapping of preset name to Preset, in file order. Empty when the
        library has no presets.json.

    Raises:
        PresetError: If the file is not valid JSON or fails the schema.
        IOFailure: If the file exists but cannot be read.
    """
    path = Path(root) / PRESETS_FILENAME
    if not path.is_file():
        logger.debug("No preset manifest at %s", path)
        return {}

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(path, str(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PresetError("Invalid JSON in {}: {}".format(path, exc)) from exc

    try:
        jsonschema.validate(instance=data, schema=PRESETS_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise PresetError(
            "Invalid preset manifest {} at {}: {}".format(path, location, exc.message)
        ) from exc

    presets: Dict[str, Preset] = {}
    for name, entry in data["presets"].items():
        presets[name] = Preset(
            name=name,
            modules=tuple(entry["modules"]),
            description=entry.get("description", ""),
            separator=entry.get("separator"),
        )
    logger.debug("Loaded %d preset(s) from %s", len(presets), path)
    return presets


def get_preset(root: str | Path, name: str) -> Preset:
    """Look up one preset by name, raising PresetError if it doesn't exist."""
    presets = load_presets(root)
    if name not in presets:
        available = ", ".join(sorted(presets)) or "none"
        raise PresetError("Unknown preset '{}'. Available presets: {}".format(name, available))
    return presets[name]
