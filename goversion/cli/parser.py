"""
goversion CLI argument parser.

The command line is positional: the first argument is either a command
(`list`, `listdl`, `install`) or a Go version, in which case the remaining
arguments are passed to that version's `go` binary.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from goversion.core.exceptions import DownloadError, GoVersionError, UsageError

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("goversion")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

USAGE = """goversion is a tool to install and use multiple Go versions.

Usage:

        goversion list                  list known Go versions
        goversion listdl                list Go versions prebuilt for this platform
        goversion install <version>     install a Go version
        goversion <version> <args>      run 'go args' using a given Go version

For example:

goversion install 1.8beta1
goversion 1.8beta1 test ./...

"""

# Command module mapping; update, export and download are undocumented
COMMAND_MAP = {
    "list": "goversion.cli.commands.list",
    "listdl": "goversion.cli.commands.listdl",
    "install": "goversion.cli.commands.install",
    "update": "goversion.cli.commands.update",
    "export": "goversion.cli.commands.export",
    "download": "goversion.cli.commands.download",
}

RUN_MODULE = "goversion.cli.commands.run"


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors with the goversion usage text."""

    def print_usage(self, file=None):
        (file or sys.stderr).write(USAGE)

    def error(self, message):
        sys.stderr.write(USAGE)
        sys.stderr.write(f"{self.prog}: error: {message}\n")
        sys.exit(2)


class CLI:
    """goversion command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create the argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = _UsageParser(
            prog="goversion",
            description=USAGE,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=True,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"goversion {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ~/.goversion.yaml)",
        )

        parser.add_argument(
            "command", nargs="?", metavar="COMMAND", help="Command or Go version"
        )
        parser.add_argument(
            "args",
            nargs=argparse.REMAINDER,
            metavar="ARGS",
            help="Command arguments, or arguments for go",
        )
        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code: 0 on success, 1 on failure, 2 on usage errors
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            return self._usage()

        try:
            return self._dispatch_command(parsed_args)
        except UsageError as e:
            logger.debug(f"Usage error: {e}")
            return self._usage()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except DownloadError as e:
            logger.error(f"download error: {e}")
            return 1
        except GoVersionError as e:
            logger.error(str(e))
            return 1
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _usage(self) -> int:
        sys.stderr.write(USAGE)
        return 2

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Anything that is not a known command is treated as a Go version.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        module_name = COMMAND_MAP.get(args.command, RUN_MODULE)
        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
