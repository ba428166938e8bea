"""Entry point for ``python -m easy_cols``."""

from easy_cols.cli import main

main()
