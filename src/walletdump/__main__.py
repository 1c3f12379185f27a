#!/usr/bin/env python3
"""walletdump entry point"""

import typer

from walletdump.cli.commands import config_command, dump_keys_command
from walletdump.infrastructure.logging import get_logger

app = typer.Typer(
    help="walletdump - recover encrypted keys from legacy BerkeleyDB wallet files",
    add_completion=False,
    no_args_is_help=True,
)

get_logger()  # Initialize logging system

app.command("dump-keys", help="Dump encrypted master key and crypted keys")(dump_keys_command)
app.command("config", help="Display the effective configuration")(config_command)


def main():
    app()


if __name__ == "__main__":
    main()
