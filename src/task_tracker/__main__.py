"""Allow running as ``python -m task_tracker``."""

from task_tracker.cli.app import main

main()
