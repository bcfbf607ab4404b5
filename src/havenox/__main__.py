"""Allow ``python -m havenox``."""

from havenox.cli import main

main()
