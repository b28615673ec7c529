"""Allow ``python -m treehouse``."""

from treehouse.cli import main

main()
