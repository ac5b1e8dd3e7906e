from __future__ import annotations

from dataclasses import dataclass, fields

import numpy as np

from polycast._constants import BACKGROUND, TOLERANCE
from polycast.model.colour import Colour, colour_to_packed, normalise_colour

_VECTOR_FIELDS = frozenset({"camera_position", "light_direction"})


@dataclass(frozen=True)
class RenderStyle:
    """Camera, lighting and output settings for a rendered frame.

    The camera always looks along +z from :attr:`camera_position`.
    Pixel ``(x, y)`` is mapped to the view-plane point
    ``u = (x - width / 2) / screen_scale``,
    ``v = (height / 2 - y) / screen_scale`` and the ray direction
    ``(u, v, focal_length)``, normalised.

    Attributes:
        width: Output width in pixels.
        height: Output height in pixels.
        camera_position: Ray origin shared by every pixel.
        light_direction: Direction towards the light.  Need not be
            normalised; :attr:`light_unit` gives the unit vector.
        screen_scale: Pixels per view-plane unit.
        focal_length: Distance from the camera to the view plane.
        background: Colour written for pixels whose ray misses the
            solid.  Accepts any format understood by
            :func:`normalise_colour`.
        tolerance: Parallelism threshold used by the ray caster.
        n_workers: Number of threads sharing the pixel pass.  ``1``
            renders in the calling thread.
        angular_speed: Radians of rotation per second of clock time
            when animating.

    Raises:
        ValueError: If any value is out of range.
    """

    width: int = 800
    height: int = 600
    camera_position: tuple[float, float, float] = (0.0, 0.0, -5.0)
    light_direction: tuple[float, float, float] = (1.0, 1.0, -1.0)
    screen_scale: float = 300.0
    focal_length: float = 5.0
    background: Colour = BACKGROUND
    tolerance: float = TOLERANCE
    n_workers: int = 1
    angular_speed: float = 1.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"width and height must be positive, got "
                f"{self.width}x{self.height}"
            )
        for name in _VECTOR_FIELDS:
            val = tuple(float(c) for c in getattr(self, name))
            if len(val) != 3:
                raise ValueError(
                    f"{name} must have 3 components, got {len(val)}"
                )
            object.__setattr__(self, name, val)
        if np.linalg.norm(self.light_direction) < TOLERANCE:
            raise ValueError("light_direction must be non-zero")
        if self.screen_scale <= 0:
            raise ValueError(
                f"screen_scale must be positive, got {self.screen_scale}"
            )
        if self.focal_length <= 0:
            raise ValueError(
                f"focal_length must be positive, got {self.focal_length}"
            )
        if self.tolerance <= 0:
            raise ValueError(
                f"tolerance must be positive, got {self.tolerance}"
            )
        if self.n_workers < 1:
            raise ValueError(
                f"n_workers must be at least 1, got {self.n_workers}"
            )
        normalise_colour(self.background)

    @property
    def camera(self) -> np.ndarray:
        return np.array(self.camera_position, dtype=float)

    @property
    def light_unit(self) -> np.ndarray:
        """Unit vector towards the light."""
        light = np.array(self.light_direction, dtype=float)
        return light / np.linalg.norm(light)

    @property
    def background_packed(self) -> int:
        return colour_to_packed(self.background)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Vectors become
        lists and the background colour is written as ``[r, g, b]``.
        """
        d: dict = {}
        for f in fields(self):
            if f.name == "background":
                continue
            val = getattr(self, f.name)
            if val != f.default:
                d[f.name] = list(val) if f.name in _VECTOR_FIELDS else val
        if self.background_packed != BACKGROUND:
            d["background"] = list(normalise_colour(self.background))
        return d

    @classmethod
    def from_dict(cls, d: dict) -> RenderStyle:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not style fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown render style keys: {sorted(unknown)}")
        kwargs: dict = {}
        for key, val in d.items():
            if isinstance(val, list):
                val = tuple(val)
            kwargs[key] = val
        return cls(**kwargs)
