from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scriptorium.core.config import ScriptoriumConfig
from scriptorium.core.exceptions import ScriptoriumError
from scriptorium.core.index import CategoryIndex
from scriptorium.core.logging import get_logger, setup_logging
from scriptorium.infra.loaders import load_posts
from scriptorium.infra.sinks import CategoriesPageSink

app = typer.Typer(name="scriptorium", help="Scriptorium - category pages for blog posts")
categories_app = typer.Typer(name="categories", help="Commands for post categories.")
app.add_typer(categories_app)

console = Console()
logger = get_logger(__name__)

SiteRootOption = typer.Option(None, "--site-root", help="Site root (defaults to the current directory).")
DraftsOption = typer.Option(False, "--drafts", help="Include draft and archived posts.")


@app.callback()
def main(log_level: str = typer.Option("WARNING", "--log-level", help="Logging level.")):
    """
    Scriptorium command line interface.
    """
    setup_logging(log_level)


def _build_index(site_root: Path | None, drafts: bool) -> tuple[ScriptoriumConfig, CategoryIndex]:
    config = ScriptoriumConfig.load(site_root)
    include_drafts = drafts or config.blog.include_drafts
    posts = load_posts(config.paths.abs_posts_dir)
    return config, CategoryIndex.from_posts(posts, include_drafts=include_drafts)


def _fail(exc: ScriptoriumError) -> typer.Exit:
    logger.debug("Command failed", exc_info=exc)
    console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    return typer.Exit(code=1)


@categories_app.command("list")
def categories_list(site_root: Path | None = SiteRootOption, drafts: bool = DraftsOption):
    """
    Print every category label in use, sorted.
    """
    try:
        _, index = _build_index(site_root, drafts)
        categories = index.find_all_categories()
    except ScriptoriumError as exc:
        raise _fail(exc) from exc

    if not categories:
        console.print("[yellow]No categories found.[/yellow]")
        return
    for category in categories:
        console.print(category, markup=False, highlight=False)


@categories_app.command("groups")
def categories_groups(site_root: Path | None = SiteRootOption, drafts: bool = DraftsOption):
    """
    Show posts grouped by category.
    """
    try:
        _, index = _build_index(site_root, drafts)
        groups = index.all_categories_with_posts()
    except ScriptoriumError as exc:
        raise _fail(exc) from exc

    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Posts", justify="right")
    table.add_column("Titles")
    for category, posts in groups.items():
        table.add_row(escape(category), str(len(posts)), escape(", ".join(post.title for post in posts)))
    console.print(table)


@categories_app.command("render")
def categories_render(
    output: Path | None = typer.Argument(None, help="Output file (defaults to <output_dir>/categories.md)."),
    site_root: Path | None = SiteRootOption,
    drafts: bool = DraftsOption,
):
    """
    Render the categories page to Markdown.
    """
    try:
        config, index = _build_index(site_root, drafts)
        output_path = output or config.paths.abs_output_dir / "categories.md"
        sink = CategoriesPageSink(output_path, title=config.blog.page_title)
        sink.publish(index.articles())
    except ScriptoriumError as exc:
        raise _fail(exc) from exc

    console.print(f"✅ Categories page written to {escape(str(output_path))}")
