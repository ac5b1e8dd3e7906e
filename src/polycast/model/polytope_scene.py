from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from polycast._constants import MAX_FACES
from polycast.model.polytope import Polytope
from polycast.model.render_style import RenderStyle

if TYPE_CHECKING:
    from matplotlib.animation import FuncAnimation
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


@dataclass
class PolytopeScene:
    """A convex solid, given by its vertices, plus how to draw it.

    The face planes are extracted from :attr:`vertices` the first time
    they are needed and then cached; assigning new vertices (or a new
    face capacity) discards the cache.

    Attributes:
        vertices: Vertex coordinates, shape ``(n, 3)``, centred on the
            origin.
        style: Camera, lighting and output settings.
        expected_faces: Face count the vertex set should produce, or
            ``None`` to skip the check.  A mismatch is reported as a
            :class:`~polycast.hull.FaceCountWarning`.
        max_faces: Plane capacity for extraction.
        title: Scene title for display.

    Raises:
        ValueError: If *vertices* does not have shape ``(n, 3)``.
    """

    vertices: np.ndarray
    style: RenderStyle = field(default_factory=RenderStyle)
    expected_faces: int | None = None
    max_faces: int = MAX_FACES
    title: str = ""

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("vertices", "max_faces"):
            self.__dict__.pop("_polytope", None)
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        self.vertices = np.asarray(self.vertices, dtype=float)
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 3:
            raise ValueError(
                f"vertices must have shape (n, 3), got {self.vertices.shape}"
            )

    @classmethod
    def dodecahedron(
        cls,
        model_scale: float | None = None,
        style: RenderStyle | None = None,
    ) -> PolytopeScene:
        """The canonical scene: a regular dodecahedron expected to have 12 faces.

        Args:
            model_scale: Vertex scale; defaults to
                :data:`~polycast.defaults.DEFAULT_MODEL_SCALE`.
            style: Optional render style.
        """
        return cls.from_solid("dodecahedron", model_scale, style)

    @classmethod
    def from_solid(
        cls,
        name: str,
        model_scale: float | None = None,
        style: RenderStyle | None = None,
    ) -> PolytopeScene:
        """Build a scene for one of the solids in :data:`~polycast.defaults.SOLIDS`.

        Raises:
            ValueError: If *name* is not a known solid.
        """
        from polycast.defaults import DEFAULT_MODEL_SCALE, EXPECTED_FACES, SOLIDS

        if name not in SOLIDS:
            raise ValueError(
                f"unknown solid {name!r}; choose from {sorted(SOLIDS)}"
            )
        scale = model_scale if model_scale is not None else DEFAULT_MODEL_SCALE
        return cls(
            vertices=SOLIDS[name](scale),
            style=style if style is not None else RenderStyle(),
            expected_faces=EXPECTED_FACES[name],
            title=name,
        )

    @property
    def polytope(self) -> Polytope:
        """The base (unrotated) face planes, extracted on first access."""
        cached = self.__dict__.get("_polytope")
        if cached is None:
            from polycast.hull import build_polytope

            cached = build_polytope(
                self.vertices,
                self.max_faces,
                expected_faces=self.expected_faces,
            )
            self.__dict__["_polytope"] = cached
        return cached

    def render_frame(self, angle: float = 0.0) -> np.ndarray:
        """Render one flat packed-RGB frame using :attr:`style`.

        See Also:
            :func:`polycast.rendering.frame.render_frame`
        """
        from polycast.rendering.frame import render_frame

        s = self.style
        return render_frame(
            self.polytope, angle, s.camera, s.light_direction,
            s.width, s.height, style=s,
        )

    def render_mpl(
        self,
        output: str | Path | None = None,
        *,
        angle: float = 0.0,
        ax: Axes | None = None,
        show: bool | None = None,
        **style_kwargs: Any,
    ) -> Figure:
        """Render one frame as a matplotlib figure.

        See Also:
            :func:`polycast.rendering.static.render_mpl`
        """
        from polycast.rendering.static import render_mpl

        return render_mpl(
            self, output, angle=angle, ax=ax, show=show, **style_kwargs,
        )

    def animate_mpl(self, **kwargs: Any) -> FuncAnimation:
        """Animate the tumbling solid with matplotlib.

        See Also:
            :func:`polycast.rendering.animation.animate_mpl`
        """
        from polycast.rendering.animation import animate_mpl

        return animate_mpl(self, **kwargs)
