"""
mockobject CLI entry point.

Usage:
    mockobject [OPTIONS] COMMAND [ARGS]...
    python -m mockobject inspect tests/mocks.yaml
"""

import json
import logging
from pathlib import Path

import click
import yaml
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mockobject import __version__
from mockobject.api import describe_slots, dispose, identity_of, original_type_name
from mockobject.core.config import get_config
from mockobject.errors import MockError
from mockobject.fixtures import load_mocks

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="mockobject")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, verbose):
    """mockobject - Dead-simple mock objects for tests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@cli.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def inspect(path, as_json):
    """Build the mocks declared in a YAML fixture file and show their methods."""
    path = path or Path(get_config().fixtures_path)

    try:
        mocks = load_mocks(path)
    except MockError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        if as_json:
            report = [
                {
                    "identity": identity_of(mock),
                    "package": original_type_name(mock),
                    "methods": describe_slots(mock),
                }
                for mock in mocks
            ]
            click.echo(json.dumps(report, indent=2))
            return

        if not mocks:
            console.print(f"[yellow]No mocks declared in {path}[/yellow]")
            return

        for mock in mocks:
            table = Table(
                title=f"{escape(original_type_name(mock))} [dim]({identity_of(mock)})[/dim]",
                box=box.ROUNDED,
            )
            table.add_column("Method", style="cyan")
            table.add_column("Kind")
            table.add_column("Read-only", justify="center")
            table.add_column("Tracked", justify="center")

            for slot in describe_slots(mock):
                table.add_row(
                    escape(slot["name"]),
                    slot["kind"],
                    "[red]yes[/red]" if slot["read_only"] else "no",
                    "yes" if slot["tracked"] else "[dim]no[/dim]",
                )

            console.print(table)
    finally:
        for mock in mocks:
            dispose(mock)


@cli.command()
def config():
    """Show the effective configuration."""
    click.echo(yaml.dump(get_config().to_dict(), default_flow_style=False), nl=False)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
