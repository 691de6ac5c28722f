# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from .constants import CLI_NAME, ExitCode
from .context import ApplicationContext
from .utils import console

logger = logging.getLogger(__name__)


def _version_callback(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    import importlib.metadata
    from .messages import PACKAGE_NAME
    version = importlib.metadata.version(PACKAGE_NAME)
    console.print(f"[bold]{CLI_NAME}[/bold], version {version}")
    ctx.exit()


class LazyGroup(click.Group):
    def __init__(self, *args, lazy_commands=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.lazy_commands = lazy_commands or {}

    def list_commands(self, ctx):
        lazy_names = set(self.lazy_commands.keys())
        manual_names = set(super().list_commands(ctx))
        return sorted(lazy_names | manual_names)

    def get_command(self, ctx, name):
        if name in self.lazy_commands:
            from importlib import import_module
            module_path, attr_name = self.lazy_commands[name]
            module = import_module(module_path)
            return getattr(module, attr_name)

        return super().get_command(ctx, name)


def create_cli(name: str = CLI_NAME) -> click.Group:
    from landscaper_cli.cli.commands import COMMAND_MAP

    @click.pass_context
    def callback(
        ctx: click.Context,
        config: Path | None,
        log_level: str | None,
        no_color: bool
    ) -> None:
        ctx.obj = ApplicationContext.from_cli_args(
            config_file=config,
            log_level=log_level,
            no_color=no_color,
            cli_name=name
        )

    cli = LazyGroup(
        name=name,
        callback=callback,
        context_settings={"help_option_names": ["-h", "--help"]},
        lazy_commands=dict(COMMAND_MAP)
    )

    cli.params.append(click.Option(
        ["-c", "--config"],
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Override configuration file"
    ))
    cli.params.append(click.Option(
        ["-l", "--log-level"],
        type=click.Choice(["quiet", "normal", "verbose", "debug"]),
        default=None,
        metavar="LEVEL",
        help="Set log verbosity (quiet|normal|verbose|debug)"
    ))
    cli.params.append(click.Option(
        ["--no-color"],
        is_flag=True,
        help="Disable colored output"
    ))
    cli.params.append(click.Option(
        ["--version"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_version_callback,
        help="Show the version and exit."
    ))

    cli.help = """Landscaper CLI - Develop and maintain Landscaper blueprints.

\b
COMMANDS:
  landscaper-cli blueprints add execution DIR NAME   Add a deploy execution

\b
Use --help with any command for detailed options."""

    return cli


def _run_cli(name: str, args: list[str] | None = None) -> None:
    """Run CLI with consistent error handling."""
    from .exceptions import CLIError

    try:
        cli = create_cli(name)
        # Exit (e.g. --help) returns its code; commands return None on success
        rv = cli.main(args=args, prog_name=name, standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(ExitCode.INTERRUPTED)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except CLIError as e:
        # Structured CLI errors - format nicely
        console.print(e.format_for_console())
        sys.exit(e.exit_code)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        logging.exception(f"Unexpected error in {name} CLI")
        sys.exit(ExitCode.SOFTWARE)

    sys.exit(rv if isinstance(rv, int) else ExitCode.SUCCESS)


def main() -> None:
    _run_cli(CLI_NAME)


if __name__ == "__main__":
    main()
