# src/photokml/main.py
"""Pipeline turning a list of geotagged images into a KML file."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .constants import TRACE
from .extractor import GPSTagDecoder
from .exceptions import UnreadableImageError
from .generators import KmlDocumentGenerator
from .writer import write_kml

logger = logging.getLogger(__name__)


@dataclass
class KmlSummary:
    """Outcome of one KML generation run."""

    written: int = 0
    unreadable: int = 0
    no_gps: int = 0

    @property
    def total(self) -> int:
        return self.written + self.unreadable + self.no_gps

    def __str__(self):
        return (
            f"Placed {self.written} images in the kml, "
            f"skipped {self.unreadable} images due to invalid EXIF "
            f"and {self.no_gps} images due to no GPS information"
        )


def generate_kml_from_images(
    image_paths: Iterable[str],
    output_path,
    decoder: Optional[GPSTagDecoder] = None,
    log: Optional[logging.Logger] = None,
) -> KmlSummary:
    """
    Decodes every image in order and writes one placemark per geotagged image.

    Placemarks are named after the 1-based position of their image in
    ``image_paths``. Images that cannot be read or lack any of latitude,
    longitude or their references are skipped and counted; neither stops the
    run. An empty ``image_paths`` still produces a valid, empty document.

    Args:
        image_paths: Ordered paths of the images to place.
        output_path: Destination .kml file. Its name without extension becomes
            the document name. Missing parent folders are created.
        decoder: GPS tag decoder, defaults to a GPSTagDecoder sharing ``log``.
        log: Logger receiving diagnostics, defaults to this module's logger.

    Returns:
        KmlSummary with the written / unreadable / no-GPS counts.

    Raises:
        KmlSerializationError: If the document cannot be serialized.
        OSError: If the output folder or file cannot be created or written.
    """
    log = log or logger
    decoder = decoder or GPSTagDecoder(log)
    output_path = Path(output_path)

    kml_gen = KmlDocumentGenerator(output_path.stem)
    summary = KmlSummary()

    for numero_orden, image in enumerate(image_paths, start=1):
        try:
            record = decoder.decode(image)
        except UnreadableImageError as e:
            summary.unreadable += 1
            log.info(f"Failed to get GPS information for {image}: {e.reason}")
            continue

        valid = record.is_valid()
        log.log(TRACE, f"Observed GPS fields for {image}: {sorted(record.observed)}, valid: {valid}")
        if not valid:
            summary.no_gps += 1
            log.info(f"No GPS information found in image {image}")
            continue

        kml_gen.add_placemark(numero_orden, Path(image).name, record)
        summary.written += 1

    content = kml_gen.to_bytes()
    write_kml(content, output_path)
    log.info(f"Successfully generated kml {output_path.name}: {summary}")
    return summary
