"""Constants for the Vitrine viewer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SiteConfig:
    title: str
    subtitle: str
    description: str
    meta_title: str
    meta_description: str
    footer_text: str
    links: tuple = field(default_factory=tuple)


SITE_CONFIG = SiteConfig(
    title="IITG AI CONFLUENCE PHOTO GALLERY",
    subtitle="GALLERY",
    description="A curated collection of high-fidelity imagery. Updated dynamically from external sources.",
    meta_title="IITG Gallery | Fine Art Photography",
    meta_description="Professional photography showcase featuring high-resolution landscapes and portraits.",
    footer_text="© 2025 SAURAV B. Photography. All rights reserved.",
    links=(
        ("Works", "#works"),
        ("About", "#about"),
        ("Contact", "mailto:contact@anviarc.com"),
    ),
)

# Application metadata
APPLICATION_ID = "io.vitrine.Gallery"
APPLICATION_ICON = "camera-photo-symbolic"

# Manifest
DEFAULT_MANIFEST = "images1.txt"
MANIFEST_ENVVAR = "VITRINE_MANIFEST"

# Gallery layout
GRID_MAX_COLUMNS = 3
GRID_SPACING = 24
THUMBNAIL_WIDTH = 420
PLACEHOLDER_HEIGHT = 250
ERROR_HEIGHT = 256

# Lightbox
LIGHTBOX_MAX_DIMENSION = 2048

# Animation settings
REVEAL_DURATION = 700  # milliseconds
LIGHTBOX_REVEAL_DURATION = 500  # milliseconds
CROSSFADE_DURATION = 200  # milliseconds

# Back-to-top button
SCROLL_TOP_THRESHOLD = 400  # pixels

# Performance settings
ASSET_WORKERS = 6
LAZY_LOAD_BUFFER = 600  # pixels
