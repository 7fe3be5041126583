"""
CLI Client Module.

Command-line client built with Typer for communicating with the queue
service API.

Architecture:
- CLI is a thin presentation layer
- Run-scoped query families share one RunName prefix callback
- CLI calls the service via HTTP (httpx)

Usage:
    queue-cli --help
    queue-cli run list
    queue-cli run add spark ./nightly.json
    queue-cli --run nightly run plan status deploy
"""
