"""Command-line interface for tablemorph."""

from tablemorph.cli.parser import create_parser

__all__ = ["create_parser"]
