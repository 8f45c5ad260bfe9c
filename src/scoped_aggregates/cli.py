"""Command-line interface for inspecting scoped aggregate setups."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="scoped-aggregates",
    help="Inspect key-scoped aggregate features.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON."),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    from scoped_aggregates.utils.logging import configure_logging

    configure_logging(level=log_level, json_output=json_logs)


@app.command()
def schema(
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            help="Path to scoping configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print one JSON object per scoped feature."),
    ] = False,
) -> None:
    """Show every scoped feature a configuration generates."""
    from scoped_aggregates.config.loader import load_config
    from scoped_aggregates.scoping.builder import ScopedAggregateBuilder

    try:
        scoping_config = load_config(config)
        builder = ScopedAggregateBuilder.from_config(scoping_config)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    frame = builder.scoped_feature_context.to_frame()

    if as_json:
        for row in frame.to_dict(orient="records"):
            typer.echo(json.dumps(row))
        return

    table = Table(title=f"Scoped features ({scoping_config.scope_name})")
    table.add_column("Feature ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Scope", style="green")
    table.add_column("Personal data", style="yellow")

    for row in frame.itertuples(index=False):
        table.add_row(
            str(row.feature_id),
            row.name,
            row.scope,
            row.personal_data_types or "-",
        )

    console.print(table)
    console.print(
        f"[dim]{len(scoping_config.features)} features x "
        f"{len(scoping_config.scope_keys)} keys = {len(frame)} scoped features[/dim]"
    )


@app.command()
def compose(
    name: Annotated[str, typer.Argument(help="Base aggregate feature name.")],
    scope: Annotated[
        str,
        typer.Option("--scope", "-s", help="Scope key value."),
    ],
    scope_name: Annotated[
        str,
        typer.Option("--scope-name", "-n", help="What the scope represents."),
    ],
) -> None:
    """Show the scoped name and id for a single feature and key."""
    from scoped_aggregates.scoping.index import build_scoped_feature

    feature = build_scoped_feature(name, scope, scope_name, frozenset())
    typer.echo(feature.full_name)
    typer.echo(f"feature_id={feature.feature_id}")


if __name__ == "__main__":
    app()
