"""Core models, library lookup, and composition.

WHY: The core package contains the stable heart of the composer: the
data model, the on-disk module library, presets, and the pure compose
operation. The CLI and targets build on these.

HOW: models.py defines the data structures, errors.py the exception
taxonomy, library.py resolves and reads modules, presets.py loads named
requests, composer.py joins module content.

RULES:
- Composition never touches the filesystem; only the library reads
- Library lookups fail loudly; there is no fallback content
"""
