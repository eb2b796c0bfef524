"""Entry point for ``python -m defi_utils``."""

from defi_utils.cli import main

main()
