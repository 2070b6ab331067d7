"""
Command line interface.
"""

from microkernel.cli.main import cli, run_cli

__all__ = ["cli", "run_cli"]
