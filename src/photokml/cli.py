"""
Generate a KML file from the GPS tags of geotagged photos.

Usage:
    photokml -k trip.kml ./photos
    photokml --kml-file out/trip.kml IMG_0001.jpg IMG_0002.jpg ./more_photos
"""

import argparse
import logging
from typing import List, Optional

from .config import ConfigManager
from .constants import LOG_LEVELS
from .exceptions import PhotoKmlError
from .logging_config import setup_logging
from .main import generate_kml_from_images
from .resolver import get_images_from_paths

logger = logging.getLogger(__name__)


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photokml",
        description="Create a KML file with one placemark per geotagged image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  photokml -k trip.kml ./photos
  photokml --kml-file out/trip.kml IMG_0001.jpg ./more_photos
  photokml -l debug --save-config -k trip.kml ./photos
        """,
    )

    parser.add_argument(
        "-l",
        "--log-level",
        choices=LOG_LEVELS,
        default=defaults["log_level"],
        help=f"Console log level (default: {defaults['log_level']})",
    )
    parser.add_argument(
        "--file-log-level",
        choices=LOG_LEVELS,
        default=defaults["file_log_level"],
        help=f"Log file level (default: {defaults['file_log_level']})",
    )
    parser.add_argument(
        "--log-file",
        default=defaults["log_file"],
        help=f"File to write the log to (default: {defaults['log_file']})",
    )
    parser.add_argument(
        "-k",
        "--kml-file",
        default=defaults["kml_file"],
        help=f"Output KML file (default: {defaults['kml_file']})",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Remember the options above as the new defaults",
    )
    parser.add_argument(
        "images",
        nargs="*",
        help="Image files and/or directories of images",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI tool. Returns the process exit status."""
    defaults = ConfigManager.load_config()
    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    if not args.images:
        parser.error("You must provide one or more image paths, a directory of images, or both")

    setup_logging(args.log_level, args.file_log_level, args.log_file)

    if args.save_config:
        ConfigManager.save_config(
            kml_file=args.kml_file,
            log_level=args.log_level,
            file_log_level=args.file_log_level,
            log_file=args.log_file,
        )

    logger.debug(f"Provided images arg: {args.images}")
    images = get_images_from_paths(args.images)
    logger.info(f"Found {len(images)} images")

    try:
        generate_kml_from_images(images, args.kml_file)
    except (PhotoKmlError, OSError) as e:
        logger.error(f"Error while creating kml: {e}")
        return 1

    logger.info(f"KML file {args.kml_file} created successfully")
    return 0

