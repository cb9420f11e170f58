"""
Edge-clamped 2-D convolution of a single 8-bit plane with a dense kernel.

The window is centered on each output pixel with ``radius = side // 2``;
samples outside the plane take the value of the nearest border pixel.
"""
from dataclasses import dataclass
from typing import Final, TypeAlias

import numpy as np

from imgfilters.kernels import Kernel

PixelPlane: TypeAlias = np.ndarray
FloatPlane: TypeAlias = np.ndarray

ACCUMULATOR_DTYPE: Final = 'float32'
EMBOSS_BIAS: Final = 128.0
MIN_SAMPLE: Final = 0
MAX_SAMPLE: Final = 255


@dataclass(frozen=True)
class Identity:
    """Use the weighted sum as is."""


@dataclass(frozen=True)
class DivideBySum:
    """Divide the weighted sum by the sum of the kernel weights."""


@dataclass(frozen=True)
class AddBias:
    """Shift the weighted sum by a constant."""
    constant: float = EMBOSS_BIAS


NormalizationPolicy: TypeAlias = Identity | DivideBySum | AddBias


def apply(plane: PixelPlane,
          kernel: Kernel,
          policy: NormalizationPolicy = Identity()) -> PixelPlane:
    sums = accumulate(plane, kernel)
    normalized = normalize(sums, kernel, policy)

    return quantize(normalized)


def accumulate(plane: PixelPlane, kernel: Kernel) -> FloatPlane:
    """Raw weighted sums, before normalization and quantization."""
    _check_plane(plane)
    _check_kernel(kernel)

    height, width = plane.shape
    side = len(kernel)
    radius = side // 2

    padded = _pad_edges(plane, before=radius, after=side - 1 - radius)
    sums = np.zeros((height, width), dtype=ACCUMULATOR_DTYPE)

    for ky in range(side):
        for kx in range(side):
            window = padded[ky:ky + height, kx:kx + width]
            sums += window * kernel[ky, kx]

    return sums


def normalize(sums: FloatPlane,
              kernel: Kernel,
              policy: NormalizationPolicy) -> FloatPlane:
    if isinstance(policy, Identity):
        return sums
    if isinstance(policy, DivideBySum):
        return sums / kernel.sum(dtype=ACCUMULATOR_DTYPE)
    if isinstance(policy, AddBias):
        return sums + np.float32(policy.constant)

    raise TypeError(f"unsupported normalization policy: {policy!r}")


def quantize(values: FloatPlane) -> PixelPlane:
    """Clamp to the 8-bit range and truncate toward zero."""
    clamped = np.clip(values, MIN_SAMPLE, MAX_SAMPLE)
    return clamped.astype('uint8')


def _pad_edges(plane: PixelPlane, before: int, after: int) -> FloatPlane:
    # 'edge' mode repeats the border sample however wide the pad is
    return np.pad(
        plane.astype(ACCUMULATOR_DTYPE),
        pad_width=((before, after), (before, after)),
        mode='edge',
    )


def _check_plane(plane: PixelPlane) -> None:
    if plane.ndim != 2:
        raise ValueError(f"expected a 2-D plane, got shape {plane.shape}")
    if plane.size == 0:
        raise ValueError(f"plane has no pixels: shape {plane.shape}")


def _check_kernel(kernel: Kernel) -> None:
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1]:
        raise ValueError(f"kernel must be square, got shape {kernel.shape}")
    if kernel.shape[0] < 1:
        raise ValueError("kernel must have at least one weight")
