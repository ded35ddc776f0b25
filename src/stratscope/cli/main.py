"""StratScope CLI main entry point."""

import click

from stratscope import __version__
from stratscope.cli.commands import classify_command, run_command


@click.group()
@click.version_option(version=__version__)
def main():
    """StratScope - Trading Strategy Classification"""
    pass


# Register commands
main.add_command(run_command)
main.add_command(classify_command)


if __name__ == "__main__":
    main()
