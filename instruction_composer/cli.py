"""Command-line interface for the Instruction Composer.

WHY: Users need a simple way to build the instruction file for their AI
coding assistant from the terminal. The CLI wires together the full
flow (library lookup, optional preset, composition, per-tool target
rendering, file saving) behind one command.

HOW: Uses argparse with four subcommands: ``compose``, ``list``,
``targets`` and ``presets``. ``compose`` resolves every module before
writing anything, then prints the document to stdout or saves it to the
chosen target/output path. Status messages go to stderr.

RULES:
- Module refs are composed in the order given; preset modules come first
- No --target/--output: the document goes to stdout, byte for byte
- --separator accepts backslash escapes ("\\n---\\n")
- --append follows the ``cat >> target`` convention
- Status output goes to stderr (not stdout)
- Exit codes: 0 = success, 1 = composer/config error, 2 = usage error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from instruction_composer import __version__
from instruction_composer.config import (
    CATEGORY_DIRS,
    DEFAULT_SEPARATOR,
    LOG_LEVEL,
    decode_separator,
    load_library_root,
)
from instruction_composer.core.composer import compose_request
from instruction_composer.core.errors import ComposerError
from instruction_composer.core.library import ModuleLibrary, normalize_category, parse_ref
from instruction_composer.core.models import CompositionRequest, ModuleRef
from instruction_composer.core.presets import get_preset, load_presets
from instruction_composer.output import write_document
from instruction_composer.targets import TARGETS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _write_stdout(content: str) -> None:
    """Write the document to stdout as UTF-8 bytes.

    WHY: The text layer translates "\\n" on some platforms and uses the
    locale encoding, so CRLF modules or non-ASCII text would not reach a
    pipe unchanged.
    """
    sys.stdout.flush()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(content)
        sys.stdout.flush()
        return
    buffer.write(content.encode("utf-8"))
    buffer.flush()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_request(args: argparse.Namespace, root: Path) -> CompositionRequest:
    """Assemble the composition request from --preset and positional refs.

    RULES:
    - Preset modules first, then explicit modules, in the given order
    - --separator overrides the preset's separator, which overrides the default
    """
    refs: List[ModuleRef] = []
    separator: Optional[str] = None
    if args.separator is not None:
        separator = decode_separator(args.separator)

    if args.preset:
        preset = get_preset(root, args.preset)
        preset_request = preset.to_request(separator)
        refs.extend(preset_request.refs)
        separator = preset_request.separator
        _status("Preset: {} ({} modules)".format(preset.name, len(preset.modules)))

    refs.extend(parse_ref(text) for text in args.modules)

    if separator is None:
        separator = DEFAULT_SEPARATOR
    return CompositionRequest(refs=tuple(refs), separator=separator)


def _resolve_destination(args: argparse.Namespace) -> Optional[Path]:
    if args.output:
        return Path(args.output)
    if args.target:
        return Path(args.project_dir) / TARGETS[args.target]().path
    return None


def _run_compose(args: argparse.Namespace) -> None:
    root = load_library_root(args.library)
    library = ModuleLibrary(root)
    request = _build_request(args, root)

    if args.target and args.append and not TARGETS[args.target].supports_append:
        _fail("The {} target does not support --append".format(TARGETS[args.target]().name))

    # Composition resolves every module first, so a bad ref writes nothing
    document = compose_request(request, library)

    content = document.content
    if args.target:
        content = TARGETS[args.target]().render(document).content

    destination = _resolve_destination(args)
    if destination is None:
        _write_stdout(content)
        return

    mode = "append" if args.append else "overwrite"
    saved = write_document(content, destination, mode=mode, separator=request.separator)
    _status("{} {} module(s) to {}".format(
        "Appended" if args.append else "Wrote",
        len(document.module_names),
        saved,
    ))
    for name in document.module_names:
        _status("  {}".format(name))


def _run_list(args: argparse.Namespace) -> None:
    library = ModuleLibrary(load_library_root(args.library))
    category = normalize_category(args.category) if args.category else None
    for ref in library.available(category):
        print(ref)


def _run_targets(args: argparse.Namespace) -> None:
    for key, target_cls in TARGETS.items():
        target = target_cls()
        print("{:<10} {:<40} {}".format(key, target.name, target.path))


def _run_presets(args: argparse.Namespace) -> None:
    presets = load_presets(load_library_root(args.library))
    if not presets:
        _status("No presets defined.")
        return
    for name, preset in presets.items():
        print("{:<24} {}".format(name, preset.description))
        print("{:<24} {}".format("", " + ".join(preset.modules)))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="instruction_composer",
        description="Compose markdown instruction modules (roles, platforms, "
                    "languages, tool configs) into a single file for an AI "
                    "coding assistant.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s {}".format(__version__))
    parser.add_argument(
        "--library",
        default=None,
        help="Instruction library directory (default: INSTRUCTIONS_DIR or the bundled library).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    compose_parser = subparsers.add_parser(
        "compose",
        help="Compose modules into one document.",
        description="Compose modules in the order given. Refs are 'category/name' "
                    "or a bare 'name'.",
    )
    compose_parser.add_argument(
        "modules",
        nargs="*",
        metavar="MODULE",
        help="Module refs, e.g. role/data-engineer language/python.",
    )
    compose_parser.add_argument(
        "--preset",
        default=None,
        help="Start from a preset defined in the library's presets.json.",
    )
    compose_parser.add_argument(
        "--separator",
        default=None,
        help="Text between modules; backslash escapes allowed (default: '\\n---\\n').",
    )
    compose_parser.add_argument(
        "--target",
        choices=sorted(TARGETS),
        default=None,
        help="Write to the AI tool's conventional instruction file.",
    )
    compose_parser.add_argument(
        "--project-dir",
        default=".",
        help="Project directory that --target paths are relative to (default: CWD).",
    )
    compose_parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write to this file instead of stdout (overrides the --target path).",
    )
    compose_parser.add_argument(
        "--append",
        action="store_true",
        help="Append to the output file instead of replacing it.",
    )
    compose_parser.set_defaults(handler=_run_compose)

    list_parser = subparsers.add_parser("list", help="List available modules.")
    list_parser.add_argument(
        "--category",
        default=None,
        help="Only list one category ({}).".format(", ".join(CATEGORY_DIRS)),
    )
    list_parser.set_defaults(handler=_run_list)

    targets_parser = subparsers.add_parser("targets", help="List AI tool targets.")
    targets_parser.set_defaults(handler=_run_targets)

    presets_parser = subparsers.add_parser("presets", help="List presets.")
    presets_parser.set_defaults(handler=_run_presets)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        args.handler(args)
    except ComposerError as e:
        logger.debug("Command failed", exc_info=True)
        _fail(str(e))
    except ValueError as e:
        # Config errors (missing library, bad category, etc.)
        _fail(str(e))


if __name__ == "__main__":
    main()
