"""Console entry point for inspecting and trying out the interception pipeline.

Purpose
-------
Expose a small CLI so packaging checks and operators can execute
``python -m lib_log_intercept`` or the ``lib-log-intercept`` console script.

Contents
--------
* :func:`cli` - Click group with ``--version`` and ``--use-dotenv`` flags.
* ``info`` - print the metadata banner.
* ``check-level`` - run the configuration gate for a level and threshold.
* ``demo`` - install the hook into a throwaway host and emit sample events.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __init__conf__
from . import config as env_config
from . import summary_info
from .adapters import LogHost
from .application.use_cases import check_filter_level, check_output_directory
from .domain import ConfigError, InterceptIOError, LogEvent, Severity, make_sqlstate
from .domain.levels import LOG_LEVEL_CHOICES, parse_filter_level
from .runtime import RuntimeConfig, inspect_runtime, install, uninstall

_THRESHOLD_CHOICES = [name for name in LOG_LEVEL_CHOICES if name != "none"]


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help="Load LOG_INTERCEPT_* variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None) -> None:
    """Intercept host log events of one severity into a console or per-severity file."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    if env_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(env_config.DOTENV_ENV_VAR)):
        env_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        # ``summary_info`` already returns a string ending with a newline.
        click.echo(summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("check-level")
@click.argument("level", type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False))
@click.option(
    "--threshold",
    type=click.Choice(_THRESHOLD_CHOICES, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Host minimum emission level (log_min_messages) to validate against.",
)
@click.option("--directory", default="", help="Output directory to validate as well.")
def check_level_command(level: str, threshold: str, directory: str) -> None:
    """Report whether LEVEL can be intercepted with the given host threshold."""

    try:
        check_filter_level(parse_filter_level(level), Severity.from_name(threshold))
        check_output_directory(directory)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"ok: {level} can be intercepted at threshold {threshold}")


@cli.command("demo")
@click.option(
    "--level",
    type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
    default="error",
    show_default=True,
    help="Severity to intercept.",
)
@click.option(
    "--threshold",
    type=click.Choice(_THRESHOLD_CHOICES, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Minimum severity the demo host emits.",
)
@click.option("--directory", default="", help="Write <LEVEL>.log files here instead of standard error.")
@click.option("--color/--no-color", default=False, help="Colour intercepted records on the console.")
def demo_command(level: str, threshold: str, directory: str, color: bool) -> None:
    """Install the hook into a demo host and emit one event per severity."""

    primary = logging.getLogger("lib_log_intercept.demo")
    primary.propagate = False
    primary.setLevel(logging.DEBUG)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    primary.addHandler(handler)
    host = LogHost(logger=primary, log_min_messages=Severity.from_name(threshold))
    try:
        install(host, RuntimeConfig(log_level=level, log_directory=directory, colorize=color))
    except ConfigError as exc:
        primary.removeHandler(handler)
        raise click.ClickException(str(exc)) from exc
    snapshot = inspect_runtime()
    try:
        with host.statement("SELECT 1/0;"):
            for severity in (Severity.DEBUG1, Severity.INFO, Severity.WARNING, Severity.ERROR, Severity.LOG):
                host.ereport(
                    LogEvent(
                        severity,
                        f"demo {severity.label.lower()} message",
                        sql_error_code=make_sqlstate("22012") if severity is Severity.ERROR else 0,
                        detail="emitted by lib-log-intercept demo",
                        hint="change --level to intercept another severity",
                        function_name="demo_command",
                        file_name="__main__.py",
                        line_number=1,
                    )
                )
    except InterceptIOError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        uninstall()
        primary.removeHandler(handler)
    if snapshot.output_directory and snapshot.filter_level is not None:
        click.echo(f"records appended to {os.path.join(snapshot.output_directory, snapshot.filter_level.label)}.log")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command group in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click error code otherwise.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.Abort:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
