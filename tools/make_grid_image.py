"""Generate the grid image used by the transformation demo.

Writes a white image with grid lines every 40 px and a red cross through the
centre to img_grid.png. Customize the size as needed; the demo reads the
image size at runtime.
"""

from pathlib import Path

from transform2d.imaging import save_image
from transform2d.visualization import draw_grid_image


def make_grid(w: int = 640, h: int = 480, out: Path = Path("img_grid.png")):
    img = draw_grid_image(w, h)
    save_image(out, img)
    print(f"Saved grid image to {out} ({w}x{h})")


if __name__ == "__main__":
    make_grid()
