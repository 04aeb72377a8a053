from __future__ import annotations

import faulthandler
import logging
from dataclasses import replace
from typing import Annotated

import typer
from result import Err
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from lc.config.defaults import default_config
from lc.config.loader import load_config, sample_config_json
from lc.models.enums import SortMode
from lc.services.report import ReportDriver, ReportOptions
from lc.services.signals import install_signal_handlers

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": []},
    help="Display files and directory names in groups.",
)


USAGE_EXIT_CODE = 2


def _usage_text(ctx: typer.Context) -> str:
    lines = [ctx.get_usage(), ""]
    for param in ctx.command.get_params(ctx):
        if param.param_type_name != "option":
            continue
        lines.append(f"  {', '.join(param.opts):<22} {getattr(param, 'help', None) or ''}".rstrip())
    return "\n".join(lines)


def _print_usage(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    err_console.out(_usage_text(ctx), highlight=False)
    raise typer.Exit(0)


def _configure_logging(debug: bool) -> None:
    logger = logging.getLogger("lc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(
        console=Console() if debug else Console(stderr=True),
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


@app.command()
def run(
    path: Annotated[str, typer.Argument(help="Directory to list.")] = ".",
    debug: Annotated[bool, typer.Option("--debug", "-d", help="Invoke debugging mode.")] = False,
    by_time: Annotated[bool, typer.Option("--time", "-t", help="Sort by modification time.")] = False,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", min=1, help="Override maximum line width."),
    ] = None,
    max_entries: Annotated[
        int | None,
        typer.Option("--max-entries", help="Maximum entries per class (0 for unlimited)."),
    ] = None,
    config_path: Annotated[str | None, typer.Option("--config", help="Path to a JSON config file.")] = None,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    show_help: Annotated[
        bool,
        typer.Option("--help", "-h", is_eager=True, callback=_print_usage, help="Produce this summary."),
    ] = False,
) -> None:
    if sample_config:
        console.out(sample_config_json(), highlight=False)
        raise typer.Exit(0)

    _configure_logging(debug)

    config_result = load_config(path=config_path)
    if isinstance(config_result, Err):
        err_console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    overrides: dict[str, object] = {}
    if width is not None:
        overrides["max_line_width"] = width
    if by_time:
        overrides["sort_mode"] = SortMode.TIME
    if max_entries is not None:
        overrides["max_entries_per_class"] = max_entries if max_entries > 0 else None
    if overrides:
        config = replace(config, **overrides)

    options = ReportOptions(
        sort_mode=config.sort_mode,
        max_line_width=config.max_line_width,
        max_entries_per_class=config.max_entries_per_class,
    )
    report = ReportDriver(options).run(path)
    if isinstance(report, Err):
        error = report.unwrap_err()
        err_console.print(f"[red]Listing failed for {escape(error.path)}: {escape(error.message)}[/]")
        raise typer.Exit(1)

    console.out(report.unwrap(), end="", highlight=False)


def cli() -> None:
    faulthandler.enable()
    install_signal_handlers()
    try:
        app()
    except SystemExit as exc:
        if exc.code != USAGE_EXIT_CODE:
            raise
        err_console.print("\nAborted due to parameter errors")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    cli()
