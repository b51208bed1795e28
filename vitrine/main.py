"""
main.py

Package vitrine

Command line entry point.
"""

import asyncio
import logging
from typing import Annotated, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from typer import Argument, Exit, Option, Typer

from vitrine.manifest.loader import ManifestLoader
from vitrine.utils.constants import DEFAULT_MANIFEST, MANIFEST_ENVVAR

app = Typer()
console = Console()


@app.callback()
def callback(
        verbose: bool = Option(False, "-v", "--verbose", help='Show verbose output.')
):
    logging.basicConfig(
        level="DEBUG" if verbose else "INFO", format="%(message)s", datefmt="[%X]", handlers=[RichHandler()]
    )


@app.command()
def view(
        manifest: Annotated[str, Option("-m", "--manifest", envvar=MANIFEST_ENVVAR,
                                        help='Manifest URL or path to a local manifest file.')] = DEFAULT_MANIFEST,
        timeout: Annotated[Optional[float], Option(help='Manifest fetch timeout in seconds (default: wait indefinitely).')] = None,
):
    """Open the gallery viewer."""
    from vitrine.viewer import view as launch
    raise Exit(launch(manifest, timeout=timeout))


@app.command()
def parse(
        manifest: Annotated[str, Argument(help='Manifest URL or path to a local manifest file.')],
        timeout: Annotated[Optional[float], Option(help='Manifest fetch timeout in seconds.')] = 30.0,
):
    """Load a manifest and list the images the gallery would show."""
    loader = ManifestLoader(manifest, timeout=timeout)
    state = asyncio.run(loader.load())

    table = Table(title="Demo gallery" if state.using_fallback else manifest)
    table.add_column("#", justify="right", style="dim")
    table.add_column("URL", overflow="fold")
    table.add_column("Description")
    for index, record in enumerate(state.images, 1):
        table.add_row(str(index), record.url, record.description or "")
    console.print(table)

    if state.using_fallback:
        console.print(f"Viewing demo gallery ({state.fallback_reason.value}).")
    else:
        console.print(f"Loaded {state.count} photographs from external source.")


if __name__ == '__main__':
    logger = logging.getLogger(__name__)
    app()
