"""Demo script: render the default dodecahedron and a short spin."""

from pathlib import Path

from polycast import PolytopeScene

OUTPUT = Path(__file__).resolve().parent


def main():
    scene = PolytopeScene.dodecahedron()
    print(f"Loaded scene: {len(scene.vertices)} vertices, {len(scene.polytope)} planes")
    print(f"Style: {scene.style.width}x{scene.style.height}, camera {scene.style.camera_position}")

    scene.render_mpl(output=OUTPUT / "dodecahedron.png", angle=0.6)
    print(f"Rendered to {OUTPUT / 'dodecahedron.png'}")

    scene.animate_mpl(
        n_frames=48, output=OUTPUT / "dodecahedron.gif", fps=24.0,
        width=240, height=180, screen_scale=90.0, n_workers=2,
    )
    print(f"Rendered to {OUTPUT / 'dodecahedron.gif'}")


if __name__ == "__main__":
    main()
