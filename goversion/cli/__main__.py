"""
Entry point for running the goversion CLI as a module.

Usage: python -m goversion.cli [command] [args]
"""

from .parser import main

if __name__ == "__main__":
    main()
