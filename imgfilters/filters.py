"""
Image-level filters: build a kernel once and run it over every color plane.
"""
import functools

from imgfilters import channels, convolution, gradient, kernels, tools
from imgfilters.channels import Image
from imgfilters.convolution import AddBias, DivideBySum, Identity
from imgfilters.kernels import EmbossVariant


@tools.PrintExecutionTime
def box_blur(img: Image,
             radius: int,
             processes: int | None = None) -> Image:
    kernel = kernels.box_kernel(radius)
    op = functools.partial(convolution.apply, kernel=kernel, policy=Identity())

    return channels.apply_filter(img, op, processes=processes)


@tools.PrintExecutionTime
def gaussian_blur(img: Image,
                  radius: int,
                  processes: int | None = None) -> Image:
    kernel = kernels.gaussian_kernel(radius)
    op = functools.partial(convolution.apply, kernel=kernel, policy=DivideBySum())

    return channels.apply_filter(img, op, processes=processes)


@tools.PrintExecutionTime
def sobel_blur(img: Image,
               processes: int | None = None) -> Image:
    return channels.apply_filter(img, gradient.sobel, processes=processes)


@tools.PrintExecutionTime
def emboss(img: Image,
           variant: EmbossVariant | str,
           processes: int | None = None) -> Image:
    kernel = kernels.emboss_kernel(variant)
    op = functools.partial(convolution.apply, kernel=kernel, policy=AddBias())

    return channels.apply_filter(img, op, processes=processes)
