import logging
from pathlib import Path
from typing import Iterable, List

from .constants import IMAGE_EXTENSIONS, TRACE

logger = logging.getLogger(__name__)


def is_image_path(path: Path) -> bool:
    """True when the file extension is one of the supported image formats."""
    return path.suffix.lower().lstrip(".") in IMAGE_EXTENSIONS


def get_images_from_paths(image_paths: Iterable[str]) -> List[str]:
    """
    Expands a mix of image files and directories into a sorted list of image paths.

    Directories are scanned non-recursively and only files with a supported
    extension are kept. Files named explicitly are kept whatever their
    extension. Paths that do not exist are logged and skipped.
    """
    images: List[str] = []
    for image_path in image_paths:
        try:
            path = Path(image_path).resolve(strict=True)
        except (OSError, RuntimeError):
            logger.warning(f"Skipping invalid file path {image_path} provided")
            continue

        if path.is_dir():
            logger.log(TRACE, f"Adding images from directory {path}")
            for p in path.iterdir():
                if p.is_file() and is_image_path(p):
                    logger.log(TRACE, f"Found valid image file {p.name}")
                    images.append(str(p))
                else:
                    logger.log(TRACE, f"Skipping non-image file {p.name}")
        else:
            logger.log(TRACE, f"Adding image {path.name}")
            images.append(str(path))

    images.sort()
    return images
