"""
Core Infrastructure.

Configuration, logging and exceptions shared by the CLI and query layers.
"""
