"""CLI entry point for example-docs."""

import logging
from pathlib import Path

import click

from example_docs.errors import ExampleDocsError
from example_docs.generator.page import DEFAULT_TITLE, render_example, render_index
from example_docs.parser.detect import detect_kind
from example_docs.parser.example import ExampleDocument
from example_docs.parser.index import INDEX_FILENAME, IndexDocument
from example_docs.parser.loader import load_document

logger = logging.getLogger(__name__)


def _load(file_path: Path) -> IndexDocument | ExampleDocument:
    """Load a documentation file of either kind."""
    data = load_document(file_path)
    if detect_kind(data, file_path) == "index":
        return IndexDocument.from_data(data)
    return ExampleDocument.from_data(data)


def _check_file(file_path: Path) -> str | None:
    """Load one file, returning the error message if it does not build."""
    try:
        doc = _load(file_path)
    except ExampleDocsError as e:
        return str(e)
    if isinstance(doc, ExampleDocument) and not doc.requests:
        logger.warning("%s documents no requests", file_path)
    return None


@click.group()
@click.option(
    "--docs-dir",
    default=".",
    envvar="EXAMPLE_DOCS_DIR",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding index.json and the example files.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, docs_dir: Path, verbose: bool):
    """Example Docs — render API example documentation from JSON files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = docs_dir


@main.command()
@click.option("--title", default=DEFAULT_TITLE, show_default=True, help="Page heading.")
@click.pass_obj
def index(docs_dir: Path, title: str):
    """Render the index page."""
    try:
        doc = IndexDocument.from_file(docs_dir / INDEX_FILENAME)
    except ExampleDocsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(render_index(doc, title=title), nl=False)


@main.command()
@click.argument("href")
@click.pass_obj
def show(docs_dir: Path, href: str):
    """Render the example page for HREF, as linked from the index."""
    try:
        doc = ExampleDocument.from_file(docs_dir / f"{href}.json")
    except ExampleDocsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(render_example(doc), nl=False)


@main.command()
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def check(docs_dir: Path, files: tuple[Path, ...]):
    """Check that documentation files build.

    Without FILES, checks index.json and every example it links to.
    """
    if files:
        paths = list(files)
    else:
        index_path = docs_dir / INDEX_FILENAME
        try:
            links = IndexDocument.from_file(index_path).example_links()
        except ExampleDocsError as e:
            raise click.ClickException(str(e)) from e
        paths = [index_path] + [docs_dir / link for link in links]

    failures = 0
    for file_path in paths:
        error = _check_file(file_path)
        if error is None:
            click.echo(f"OK    {file_path}")
        else:
            failures += 1
            click.echo(f"FAIL  {file_path}: {error}")

    click.echo(f"Checked {len(paths)} files, {failures} failed.")
    if failures:
        raise SystemExit(1)
