"""Allow running the CLI with python -m queue_cli."""

from queue_cli.cli.main import main

if __name__ == "__main__":
    main()
