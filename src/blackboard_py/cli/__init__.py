"""Command line entry points for blackboard-py."""

from blackboard_py.cli.main import cli

__all__ = ["cli"]
