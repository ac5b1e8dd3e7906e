"""Generate static images for the documentation."""

from pathlib import Path

from polycast import PolytopeScene, RenderStyle

OUT = Path(__file__).resolve().parent


def generate_docs_images() -> None:
    style = RenderStyle(width=320, height=240, screen_scale=120.0)

    dodeca = PolytopeScene.dodecahedron(style=style)
    for angle in (0.0, 0.8):
        path = OUT / f"dodecahedron_{angle:.1f}.png"
        dodeca.render_mpl(path, angle=angle, show=False)
        print(f"  wrote {path}")

    # Each built-in solid on a white background, same pose.
    for name in ("cube", "octahedron"):
        scene = PolytopeScene.from_solid(name, 0.6, style)
        path = OUT / f"{name}.png"
        scene.render_mpl(path, angle=0.5, show=False, background="white")
        print(f"  wrote {path}")

    path = OUT / "dodecahedron_spin.gif"
    dodeca.animate_mpl(n_frames=36, output=path, fps=12.0, show=False)
    print(f"  wrote {path}")


if __name__ == "__main__":
    generate_docs_images()
