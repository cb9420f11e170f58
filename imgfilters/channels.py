from concurrent import futures
from typing import Callable, Final, Sequence, TypeAlias

import numpy as np

from imgfilters.convolution import PixelPlane
from imgfilters.errors import DimensionMismatch

Image: TypeAlias = np.ndarray
PlaneOperation: TypeAlias = Callable[[PixelPlane], PixelPlane]

CHANNELS: Final = ('red', 'green', 'blue')
OPAQUE: Final = 255


def apply_filter(img: Image,
                 op: PlaneOperation,
                 processes: int | None = None) -> Image:
    """Run ``op`` on every color plane of ``img`` on its own and put the
    results back together.

    With ``processes`` set, the planes are spread over a process pool, so
    ``op`` has to be picklable (a module-level function or a
    ``functools.partial`` of one).
    """
    planes = decompose(img)

    filtered_planes = _map_planes(op, planes, processes=processes)

    return recompose(filtered_planes)


def decompose(img: Image) -> tuple[PixelPlane, ...]:
    _check_image(img)

    return tuple(
        np.ascontiguousarray(img[:, :, i]) for i in range(len(CHANNELS))
    )


def recompose(planes: Sequence[PixelPlane]) -> Image:
    planes = tuple(planes)
    shapes = tuple(plane.shape for plane in planes)

    if len(planes) != len(CHANNELS):
        raise DimensionMismatch(
            shapes, f"expected {len(CHANNELS)} planes, got {len(planes)}")
    if len(set(shapes)) != 1 or len(shapes[0]) != 2:
        raise DimensionMismatch(shapes)

    height, width = shapes[0]
    new = np.empty((height, width, len(CHANNELS) + 1), dtype='uint8')

    for i, plane in enumerate(planes):
        new[:, :, i] = plane
    new[:, :, len(CHANNELS)] = OPAQUE

    return new


def _map_planes(op: PlaneOperation,
                planes: tuple[PixelPlane, ...],
                processes: int | None) -> list[PixelPlane]:
    if processes is None:
        return [op(plane) for plane in planes]

    with futures.ProcessPoolExecutor(max_workers=processes) as executor:
        results = executor.map(op, planes)

    return list(results)


def _check_image(img: Image) -> None:
    if img.ndim != 3 or img.shape[2] not in (len(CHANNELS), len(CHANNELS) + 1):
        raise ValueError(f"expected an RGB or RGBA image, got shape {img.shape}")
    if img.shape[0] < 1 or img.shape[1] < 1:
        raise ValueError(f"image has no pixels: shape {img.shape}")
