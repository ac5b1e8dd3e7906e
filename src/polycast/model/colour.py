from __future__ import annotations

import numpy as np

#: A colour specification accepted throughout polycast.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"lime"``, ``"#00ff00"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``
#:   (e.g. ``(0.0, 1.0, 0.0)``).
#: - A packed ``0xRRGGBB`` integer.
#:
#: See :func:`normalise_colour` for conversion to a normalised RGB tuple.
Colour = str | float | int | tuple[float, float, float] | list[float]


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour specification to a normalised (r, g, b) tuple.

    Accepts CSS colour names (e.g. ``"lime"``), hex strings
    (e.g. ``"#00FF00"``), grey floats (e.g. ``0.7``), RGB tuples
    (e.g. ``(0.0, 1.0, 0.0)``) or packed integers (e.g. ``0x00FF00``).

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of three floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, bool):
        raise ValueError(f"Cannot interpret colour: {colour!r}")

    if isinstance(colour, (int, np.integer)):
        packed = int(colour)
        if not 0 <= packed <= 0xFFFFFF:
            raise ValueError(
                f"Packed colour must be in [0, 0xFFFFFF], got {packed:#x}"
            )
        r, g, b = unpack_rgb(packed)
        return (r / 255.0, g / 255.0, b / 255.0)

    if isinstance(colour, float):
        if not 0.0 <= colour <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {colour}")
        return (colour, colour, colour)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (float(c) for c in colour)
        for name, val in [("r", r), ("g", g), ("b", b)]:
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"RGB component {name} must be in [0, 1], got {val}"
                )
        return (r, g, b)

    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a ``0xRRGGBB`` integer."""
    return (int(r) << 16) | (int(g) << 8) | int(b)


def unpack_rgb(packed: int) -> tuple[int, int, int]:
    """Split a ``0xRRGGBB`` integer into 8-bit channels."""
    packed = int(packed)
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def colour_to_packed(colour: Colour) -> int:
    """Convert any :data:`Colour` to a packed ``0xRRGGBB`` integer."""
    r, g, b = normalise_colour(colour)
    return pack_rgb(round(r * 255), round(g * 255), round(b * 255))


def pixels_to_rgb(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """Expand a flat packed pixel buffer into an ``(height, width, 3)`` image.

    The result is ``uint8`` and suitable for ``imshow``.
    """
    packed = np.asarray(pixels, dtype=np.uint32).reshape(height, width)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[..., 0] = (packed >> 16) & 0xFF
    rgb[..., 1] = (packed >> 8) & 0xFF
    rgb[..., 2] = packed & 0xFF
    return rgb
