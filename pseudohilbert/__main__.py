"""Allow running as `python -m pseudohilbert`."""

from pseudohilbert.cli import main

main()
