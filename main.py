"""Demo programs: dense linear algebra and 2D image transformations."""
from pathlib import Path
from typing import Optional
import cv2
import numpy as np
import typer
from rich import print
from rich.markup import escape

from transform2d import (
    TransformError,
    apply,
    compose,
    deg2rad,
    euclidean,
    rotation,
    scaling,
    translation,
    warp_image,
)
from transform2d import config
from transform2d.imaging import load_image, save_image
from transform2d.interop import to_cv_matrix, warp_image_cv
from transform2d.linalg import run_walkthrough
from transform2d.visualization import draw_points
from transform2d.utils import canonical_interpolation

app = typer.Typer(add_completion=False, help="Linear algebra and 2D transformation demos.")


def _fmt(value) -> str:
    if isinstance(value, np.ndarray):
        value = np.array2string(value, precision=4, suppress_small=True)
    return escape(str(value))


@app.command()
def linalg():
    """Walk through vectors, matrices, blocks, arithmetic and reductions."""
    for title, values in run_walkthrough():
        print(f"[bold]{title}:[/bold]")
        print("-" * (len(title) + 1))
        for name, value in values.items():
            print(f"{escape(name)} = \n{_fmt(value)}\n")


@app.command()
def transform(
    image: Path = typer.Option(config.DEFAULT_IMAGE, help="Input image file"),
    angle_deg: float = typer.Option(config.ANGLE_DEG, help="Rotation angle in degrees"),
    tx: float = typer.Option(config.TRANSLATION[0], help="Translation in x (px)"),
    ty: float = typer.Option(config.TRANSLATION[1], help="Translation in y (px)"),
    scale: float = typer.Option(config.SCALE, help="Scale of the similarity about the image centre"),
    interpolation: str = typer.Option(config.DEFAULT_INTERPOLATION, help="'nearest'|'bilinear'|'bicubic'"),
    backend: str = typer.Option("native", help="'native' inverse warp or 'opencv' warpPerspective"),
    workers: str = typer.Option("1", help="Warp threads: 'auto' or a number"),
    out_dir: Optional[Path] = typer.Option(None, help="Optional directory for the transformed images"),
    show: bool = typer.Option(True, help="Show the images in windows and wait for a key"),
):
    """Transform a pixel and an image with a Euclidean and a similarity transform."""
    if canonical_interpolation(interpolation) is None:
        print(f"[red]Unknown interpolation: {interpolation}[/red]")
        raise typer.Exit(code=2)
    if backend not in ("native", "opencv"):
        print(f"[red]Unknown backend: {backend}[/red]")
        raise typer.Exit(code=2)

    def warp(T, img):
        if backend == "opencv":
            return warp_image_cv(T, img, interpolation=interpolation)
        return warp_image(T, img, interpolation=interpolation, workers=workers)

    try:
        # 1. Homogeneous representation: rotate, then translate.
        angle = deg2rad(angle_deg)
        R = rotation(angle)
        E = euclidean(angle, tx, ty)
        print(f"Euclidean transformation E = \n{_fmt(E.matrix)}\n")

        u = config.PIXEL
        u_transformed = apply(E, u)
        print(f"Original pixel u = {u}")
        print(f"Transformed pixel u_transformed = ({u_transformed.x:.4f}, {u_transformed.y:.4f})\n")

        # 2. Matrix handed to OpenCV.
        print(f"Euclidean transformation E_cv = \n{_fmt(to_cv_matrix(E))}\n")
    except TransformError as e:
        print(f"[red]Transform failed: {e}[/red]")
        raise typer.Exit(code=1)

    try:
        img_orig = load_image(image)
    except FileNotFoundError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    try:
        # 3. Transform the image.
        img_trans_E = warp(E, img_orig)

        # 4. Rotate and scale around the image centre.
        c = (0.5 * img_orig.shape[1], 0.5 * img_orig.shape[0])
        S = compose(
            translation(c[0], c[1]),
            scaling(scale),
            R,
            translation(-c[0], -c[1]),
        )
        print(f"Similarity transformation S = \n{_fmt(S.matrix)}\n")
        c_mapped = apply(S, c)
        print(f"Image centre {c} -> ({c_mapped.x:.4f}, {c_mapped.y:.4f})\n")
        img_trans_S = warp(S, img_orig)
    except TransformError as e:
        print(f"[red]Transform failed: {e}[/red]")
        raise typer.Exit(code=1)

    if out_dir is not None:
        path_E = save_image(out_dir / "transformed_E.png", img_trans_E)
        path_S = save_image(out_dir / "transformed_S.png", img_trans_S)
        print(f"Saved images: {path_E}, {path_S}")

    if show:
        for title, img in (
            (config.WINDOW_ORIGINAL, draw_points(img_orig, [u])),
            (config.WINDOW_TRANSFORMED, draw_points(img_trans_E, [u_transformed])),
            (config.WINDOW_COMPOSED, draw_points(img_trans_S, [c_mapped])),
        ):
            cv2.namedWindow(title, cv2.WINDOW_NORMAL)
            cv2.imshow(title, img)
        print("[yellow]Press a key in one of the windows to exit.[/yellow]")
        cv2.waitKey()
        cv2.destroyAllWindows()

    print("[green]Done.[/green]")


if __name__ == "__main__":
    app()
