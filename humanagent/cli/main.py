"""CLI interface for humanagent using Typer."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ..core.config.loader import load_config
from ..core.engine.matching import MatchingEngine, derive_confidence
from ..interactive.assistant import render_response, run_chat_session
from ..kb.knowledge_base import KnowledgeBase, KnowledgeBaseError
from ..kb.loader import load_knowledge_base
from ..observability.logger import get_logger, setup_logging

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="humanagent",
    help="Menschen-Wissensagent - answers questions about the human being from a curated knowledge base",
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    knowledge: Annotated[
        Path | None,
        typer.Option(
            "--knowledge",
            "-k",
            help="Path to a knowledge YAML file (defaults to the bundled knowledge base)",
            dir_okay=False,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override logging level (DEBUG, INFO, ...)"),
    ] = None,
):
    """Load configuration and logging before any command runs."""
    config = load_config()
    if knowledge is not None:
        config.setdefault("knowledge", {})["path"] = str(knowledge)
    if log_level:
        config.setdefault("logging", {})["level"] = log_level

    log_config = config.get("logging") or {}
    setup_logging(
        log_level=log_config.get("level", "WARNING"),
        log_format=log_config.get("format", "console"),
        log_file=log_config.get("file"),
    )
    ctx.obj = config


def _get_knowledge_base(ctx: typer.Context) -> KnowledgeBase:
    """Load the configured knowledge base or exit with an error."""
    path = ((ctx.obj or {}).get("knowledge") or {}).get("path")
    try:
        return load_knowledge_base(path)
    except KnowledgeBaseError as e:
        logger.error("knowledge_base_load_failed", path=path, error=str(e))
        console.print(f"[red]! Error:[/red] {e}")
        raise typer.Exit(code=1)


@app.command()
def ask(
    ctx: typer.Context,
    question: Annotated[str, typer.Argument(help="Question about the human being")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the structured response as JSON")
    ] = False,
    top_n: Annotated[
        int, typer.Option("--top", "-n", help="Also show the N best scoring entries")
    ] = 0,
):
    """Answer a single question."""
    if top_n < 0:
        console.print("[red]! Error:[/red] --top must not be negative")
        raise typer.Exit(code=1)

    engine = MatchingEngine(_get_knowledge_base(ctx))
    response = engine.answer(question)

    if as_json:
        typer.echo(response.model_dump_json(indent=2))
        return

    console.print(render_response(response))

    if top_n:
        matches = engine.rank(question, limit=top_n)
        if not matches:
            console.print("[yellow]No entry matched any keyword[/yellow]")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Rank", style="dim", width=6)
        table.add_column("Entry")
        table.add_column("Category")
        table.add_column("Keywords", justify="right")
        table.add_column("Chars", justify="right")
        table.add_column("Confidence")

        for rank, match in enumerate(matches, start=1):
            confidence = derive_confidence(match.score, len(match.entry.keywords))
            table.add_row(
                str(rank),
                match.entry.title,
                match.entry.category,
                str(match.score),
                str(match.matched_chars),
                confidence.value,
            )

        console.print(table)


@app.command()
def chat(ctx: typer.Context):
    """Interactive chat about the human being."""
    engine = MatchingEngine(_get_knowledge_base(ctx))
    run_chat_session(engine, console=console)


@app.command()
def topics(ctx: typer.Context):
    """Show the knowledge categories and how many topics each holds."""
    knowledge_base = _get_knowledge_base(ctx)

    table = Table(title="Wissenskarten", show_header=True, header_style="bold magenta")
    table.add_column("Category")
    table.add_column("Themen", justify="right")

    for overview in knowledge_base.category_overview():
        table.add_row(overview.category, str(overview.count))

    console.print(table)
    console.print(f"[dim]{len(knowledge_base)} kuratierte Wissensknoten[/dim]")


if __name__ == "__main__":
    app()
