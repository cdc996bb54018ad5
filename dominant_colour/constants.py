# dominant_colour/constants.py
"""
Defaults and thresholds used across the project.

- Public call defaults (DEFAULT_*)
- Buffer layout (COLOUR_DEPTH)
- Candidate filter thresholds (ALPHA_THRESHOLD, WHITE_THRESHOLD)
- Quantiser limits and swatch geometry
"""
from __future__ import annotations

# =========================
# Call defaults
# =========================
DEFAULT_COLOR_COUNT: int = 3
DEFAULT_QUALITY: int = 10
DEFAULT_IGNORE_WHITE: bool = False

# =========================
# Pixel buffer layout
# =========================
# Bytes per pixel, R,G,B,A in that order. Not user-configurable.
COLOUR_DEPTH: int = 4

# =========================
# Candidate filter
# =========================
# Pixels with alpha below this are too transparent to count.
ALPHA_THRESHOLD: int = 125
# With ignore_white, pixels whose R, G and B all exceed this are dropped.
WHITE_THRESHOLD: int = 250

# =========================
# Quantiser
# =========================
MIN_COLOR_COUNT: int = 1
MAX_COLOR_COUNT: int = 256  # Pillow palette size
OPAQUE_ALPHA: int = 255
# YIQ luma below this marks a colour as dark.
DARK_LUMA_THRESHOLD: float = 128.0

# =========================
# Swatch output
# =========================
SWATCH_WIDTH: int = 480
SWATCH_HEIGHT: int = 64

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp", ".tif", ".tiff"}
