"""
Vitrine - photo gallery viewer.

This package loads a list of image references from a text manifest, falls
back to a bundled demo set when it cannot, and shows the images in a grid
with a navigable full-screen lightbox (GTK4/Adwaita).
"""

__version__ = '0.1.0'
