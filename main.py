import argparse
import sys
from typing import Final

from imgfilters import filters
from imgfilters import image_io
from imgfilters import tools
from imgfilters.config import DEFAULT_CONFIG_PATH, load_config
from imgfilters.errors import FilterError

SAVE_FOLDER: Final = '.'
BOX_BLUR_NAME: Final = 'box_blur.png'
GAUSSIAN_BLUR_NAME: Final = 'gaussian_blur.png'
SOBEL_NAME: Final = 'sobel_blur.png'
EMBOSS_NAME: Final = 'emboss.png'


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply box blur, Gaussian blur, Sobel and emboss to an image.")
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH,
                        help="path to the TOML config (default: %(default)s)")
    parser.add_argument('--output-dir', default=SAVE_FOLDER,
                        help="folder for the filtered images (default: %(default)s)")
    parser.add_argument('--processes', type=_positive_int, default=None,
                        help="filter the color channels in this many processes")
    parser.add_argument('--timing', action='store_true',
                        help="print how long every filter takes")

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    tools.PrintExecutionTime.ENABLED = args.timing

    config = load_config(args.config)
    raw_img = image_io.read_image(config.image)

    processed_images = {
        BOX_BLUR_NAME: filters.box_blur(
            raw_img, config.box_radius, processes=args.processes),
        GAUSSIAN_BLUR_NAME: filters.gaussian_blur(
            raw_img, config.gaussian_radius, processes=args.processes),
        SOBEL_NAME: filters.sobel_blur(raw_img, processes=args.processes),
        EMBOSS_NAME: filters.emboss(
            raw_img, config.emboss_kind, processes=args.processes),
    }

    image_io.save_pictures(processed_images, args.output_dir)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        run(args)
    except (FilterError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    print("Images are saved")


if __name__ == '__main__':
    main()
