"""Package entry point for ``python -m textgrid_converter``.

WHY: Users run the converter as ``python -m textgrid_converter input.TextGrid``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from textgrid_converter.cli import main

if __name__ == "__main__":
    main()
