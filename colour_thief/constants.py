# colour_thief/constants.py
"""
Tunables used across the project.

- Histogram resolution (SIG_BITS, RSHIFT, HISTO_SIZE)
- Median cut policy (FRACT_BY_POPULATION, MAX_ITERATIONS)
- Public API defaults (DEFAULT_*)
- Pixel filtering (ALPHA_MIN, WHITE_MIN)
- Dark/light thresholds per luma scale
"""
from __future__ import annotations

# ===================
# Histogram (reduced)
# ===================
SIG_BITS: int = 5
RSHIFT: int = 8 - SIG_BITS
HISTO_SIDE: int = 1 << SIG_BITS
HISTO_SIZE: int = 1 << (3 * SIG_BITS)

# ==========
# Median cut
# ==========
FRACT_BY_POPULATION: float = 0.75
MAX_ITERATIONS: int = 1000

# ============
# API defaults
# ============
DEFAULT_COLOUR_COUNT: int = 5
DEFAULT_QUALITY: int = 10
DEFAULT_IGNORE_WHITE: bool = True
DOMINANT_COLOUR_COUNT: int = 256

# ===============
# Pixel filtering
# ===============
ALPHA_MIN: int = 125
WHITE_MIN: int = 250

# ====
# Luma
# ====
YIQ_DARK_THRESHOLD: int = 128  # 0..255 scale
LINEAR_DARK_THRESHOLD: int = 428  # 0..1000 scale
LINEAR_LUMA_SCALE: float = 1000.0

__all__ = [
    "SIG_BITS",
    "RSHIFT",
    "HISTO_SIDE",
    "HISTO_SIZE",
    "FRACT_BY_POPULATION",
    "MAX_ITERATIONS",
    "DEFAULT_COLOUR_COUNT",
    "DEFAULT_QUALITY",
    "DEFAULT_IGNORE_WHITE",
    "DOMINANT_COLOUR_COUNT",
    "ALPHA_MIN",
    "WHITE_MIN",
    "YIQ_DARK_THRESHOLD",
    "LINEAR_DARK_THRESHOLD",
    "LINEAR_LUMA_SCALE",
]
