import enum
import math
from typing import Final, TypeAlias

import numpy as np

from imgfilters.errors import InvalidRadius

Kernel: TypeAlias = np.ndarray

KERNEL_DTYPE: Final = 'float32'


def _freeze(kernel: Kernel) -> Kernel:
    kernel.flags.writeable = False
    return kernel


SOBEL_X: Final = _freeze(np.array([
    [-1, 0, 1],
    [-2, 0, 2],
    [-1, 0, 1],
], dtype=KERNEL_DTYPE))

SOBEL_Y: Final = _freeze(np.array([
    [1, 2, 1],
    [0, 0, 0],
    [-1, -2, -1],
], dtype=KERNEL_DTYPE))

EMBOSS_LEFT: Final = _freeze(np.array([
    [1, 0, 0],
    [0, 0, 0],
    [0, 0, -1],
], dtype=KERNEL_DTYPE))

EMBOSS_RIGHT: Final = _freeze(np.array([
    [0, 0, 1],
    [0, 0, 0],
    [-1, 0, 0],
], dtype=KERNEL_DTYPE))

EMBOSS_EDGE: Final = _freeze(np.array([
    [-1, -1, -1, -1, 0],
    [-1, -1, -1, 0, 1],
    [-1, -1, 0, 1, 1],
    [-1, 0, 1, 1, 1],
    [0, 1, 1, 1, 1],
], dtype=KERNEL_DTYPE))

EMBOSS_APPLICATION: Final = _freeze(np.array([
    [-2, -1, 0],
    [-1, 1, 1],
    [0, 1, 2],
], dtype=KERNEL_DTYPE))


class EmbossVariant(enum.Enum):
    LEFT = 'left'
    RIGHT = 'right'
    EDGE = 'edge'
    APPLICATION = 'application'


_EMBOSS_TABLES: Final = {
    EmbossVariant.LEFT: EMBOSS_LEFT,
    EmbossVariant.RIGHT: EMBOSS_RIGHT,
    EmbossVariant.EDGE: EMBOSS_EDGE,
    EmbossVariant.APPLICATION: EMBOSS_APPLICATION,
}


def box_kernel(radius: int) -> Kernel:
    """Uniform kernel of side ``2 * radius``.

    The side is even, so the window convolution centers it on is one cell
    longer before the pixel than after it.
    """
    _check_radius(radius)
    side = 2 * radius
    kernel = np.full((side, side), 1.0 / (side * side), dtype=KERNEL_DTYPE)

    return _freeze(kernel)


def gaussian_kernel(radius: int) -> Kernel:
    """Gaussian kernel of side ``2 * radius + 1`` with sigma ``radius / 3``,
    rescaled so its weights sum to 1.
    """
    _check_radius(radius)
    side = 2 * radius + 1
    sigma = np.float32(radius / 3.0)
    mean = np.float32(radius)

    y, x = np.indices((side, side), dtype=KERNEL_DTYPE)
    exponent = -((x - mean) ** 2 + (y - mean) ** 2) / (2.0 * sigma ** 2)
    scale = np.float32(1.0) / (np.float32(2.0 * math.pi) * sigma ** 2)
    kernel = scale * np.exp(exponent)
    kernel = kernel.astype(KERNEL_DTYPE)

    total = kernel.sum(dtype=KERNEL_DTYPE)
    kernel = kernel / total

    return _freeze(kernel.astype(KERNEL_DTYPE))


def sobel_kernels() -> tuple[Kernel, Kernel]:
    return SOBEL_X, SOBEL_Y


def emboss_kernel(variant: EmbossVariant | str) -> Kernel:
    return _EMBOSS_TABLES[EmbossVariant(variant)]


def _check_radius(radius: int) -> None:
    # bool is an int subclass, but True is not a radius
    if isinstance(radius, bool) or not isinstance(radius, (int, np.integer)):
        raise InvalidRadius(radius)
    if radius < 1:
        raise InvalidRadius(radius)
