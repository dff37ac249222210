"""
Command implementations for the goversion CLI.

Each module exposes run(args) -> int.
"""
