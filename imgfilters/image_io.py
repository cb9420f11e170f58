from pathlib import Path

import cv2 as cv
import numpy as np

from imgfilters.channels import Image
from imgfilters.errors import ImageReadError, ImageWriteError


def read_image(path: str | Path) -> Image:
    """Decode an image file into an RGBA uint8 array."""
    raw_img = cv.imread(str(path), cv.IMREAD_UNCHANGED)
    if raw_img is None:
        raise ImageReadError(f"failed to open image: {path}")

    if raw_img.dtype == np.uint16:
        raw_img = (raw_img >> 8).astype(np.uint8)
    elif raw_img.dtype != np.uint8:
        raise ImageReadError(f"unsupported sample type {raw_img.dtype}: {path}")

    if raw_img.ndim == 2:
        return cv.cvtColor(raw_img, cv.COLOR_GRAY2RGBA)
    if raw_img.shape[2] == 4:
        return cv.cvtColor(raw_img, cv.COLOR_BGRA2RGBA)

    return cv.cvtColor(raw_img, cv.COLOR_BGR2RGBA)


def save_image(img: Image, path: str | Path) -> None:
    if img.shape[2] == 4:
        bgr_img = cv.cvtColor(img, cv.COLOR_RGBA2BGRA)
    else:
        bgr_img = cv.cvtColor(img, cv.COLOR_RGB2BGR)

    try:
        saved = cv.imwrite(str(path), bgr_img)
    except cv.error as e:
        raise ImageWriteError(f"failed to save image: {path}: {e}") from e

    if not saved:
        raise ImageWriteError(f"failed to save image: {path}")


def save_pictures(pictures: dict[str, Image], folder: str | Path) -> list[Path]:
    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)

    paths = []
    for name, img in pictures.items():
        img_path = folder / name
        save_image(img, img_path)
        paths.append(img_path)

    return paths
