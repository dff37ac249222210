"""
Entry point for running goversion as a module.

Usage: python -m goversion [command] [args]
"""

from goversion.cli.parser import main

if __name__ == "__main__":
    main()
