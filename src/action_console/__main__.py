"""Allow ``python -m action_console``."""

from action_console.cli.main import main

main()
