"""
goversion - install and use multiple Go versions.

Builds Go toolchains from a local mirror of the Go repository, or downloads
prebuilt distributions, and runs a chosen version's go command.
"""

__version__ = "0.1.0"
