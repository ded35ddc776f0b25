"""Commands __init__ - exports all commands."""

from stratscope.cli.commands.classify import classify_command
from stratscope.cli.commands.run import run_command

__all__ = ["classify_command", "run_command"]
