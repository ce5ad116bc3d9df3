"""Package entry point for ``python -m instruction_composer``.

WHY: Users run the composer as ``python -m instruction_composer compose
role/data-engineer language/python`` without installing a console script.

HOW: Delegates to the CLI's main() function.
"""

from instruction_composer.cli import main

if __name__ == "__main__":
    main()
