import numpy as np

from imgfilters import convolution, kernels
from imgfilters.convolution import PixelPlane


def sobel(plane: PixelPlane) -> PixelPlane:
    """Sobel gradient magnitude.

    Both directional sums stay unquantized until they are combined, so a
    strong negative gradient still counts toward the edge strength.
    """
    sobel_x, sobel_y = kernels.sobel_kernels()

    gx = convolution.accumulate(plane, sobel_x)
    gy = convolution.accumulate(plane, sobel_y)
    magnitude = np.sqrt(gx * gx + gy * gy)

    return convolution.quantize(magnitude)
