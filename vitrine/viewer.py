"""Entry point for the graphical viewer."""

from pathlib import Path
from typing import Optional, Union

from .manifest.loader import ManifestLoader


def view(source: Union[str, Path], timeout: Optional[float] = None) -> int:
    """
    Launch the gallery viewer.

    Args:
        source: Manifest URL or path to a local manifest file
        timeout: Manifest fetch timeout in seconds; None waits indefinitely

    Returns:
        The application exit code
    """
    from .application import GalleryApplication

    app = GalleryApplication(lambda: ManifestLoader(source, timeout=timeout))
    return app.run_app()
