"""Shared constants used across the model and rendering layers."""

TOLERANCE: float = 1e-6
"""Degeneracy and parallelism threshold.

Cross products shorter than this are collinear triples, plane/ray
denominators smaller than this are parallel, and vertices within this
distance of a candidate plane count as lying on it.
"""

DEDUP_TOLERANCE: float = 1e-3
"""Looser threshold under which two extracted planes are the same face."""

MAX_FACES: int = 30
"""Default plane capacity for hull extraction."""

BACKGROUND: int = 0x00FF00
"""Packed RGB value written for pixels whose ray misses the solid."""

DEFAULT_NORMAL: tuple[float, float, float] = (0.0, 0.0, 1.0)
"""Shading normal used when a hit has no recorded entry face."""
