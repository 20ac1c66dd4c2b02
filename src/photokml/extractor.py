import logging
import math
import numbers
import struct
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

from PIL import Image, ExifTags, UnidentifiedImageError
import pillow_heif

from .constants import GPS_TAG_FIELDS, TRACE
from .exceptions import UnreadableImageError
from .models import CharValue, FloatValue, GPSFieldValue, GPSRecord, IntValue, FIELD_TYPES

# Register HEIF opener
pillow_heif.register_heif_opener()

# Configure logger
logger = logging.getLogger(__name__)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def to_field_value(raw: Any) -> Optional[GPSFieldValue]:
    """
    Converts a raw GPS tag value as returned by Pillow into a field value.

    Rationals become decimal degrees (a single value as-is, a triple through
    degrees + minutes/60 + seconds/3600), bytes and plain integers become an
    integer, text becomes its first character. Returns None for any other shape
    and for rationals that do not give a finite number.
    """
    if isinstance(raw, str):
        if raw:
            return CharValue(raw[0])
        return None

    if isinstance(raw, (bytes, bytearray)):
        if raw:
            return IntValue(raw[0])
        return None

    if isinstance(raw, int) and not isinstance(raw, bool):
        return IntValue(raw)

    if _is_real(raw):
        return _finite(float(raw))

    if isinstance(raw, (tuple, list)) and all(_is_real(v) for v in raw):
        if len(raw) == 1:
            return _finite(float(raw[0]))
        if len(raw) == 3:
            d, m, s = (float(v) for v in raw)
            return _finite(d + (m / 60.0) + (s / 3600.0))

    return None


def _finite(value: float) -> Optional[FloatValue]:
    # Rationals with a zero denominator come back from Pillow as nan
    if math.isfinite(value):
        return FloatValue(value)
    return None


@contextmanager
def _without_pixel_limit():
    """Lifts Pillow's decompression bomb check. Pixel data is never decoded here."""
    limit = Image.MAX_IMAGE_PIXELS
    Image.MAX_IMAGE_PIXELS = None
    try:
        yield
    finally:
        Image.MAX_IMAGE_PIXELS = limit


class GPSTagDecoder:
    """Reads the six GPS position tags of an image into a GPSRecord."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger

    def decode(self, file_path) -> GPSRecord:
        """
        Opens the image and decodes its GPS tags.

        Tags missing from the image are left unset. A tag whose value has an
        unexpected shape is logged and skipped without affecting the others.

        Raises:
            UnreadableImageError: If the file cannot be opened, is not a known
                image format or carries no readable EXIF container.
        """
        file_path = Path(file_path)
        self.logger.log(TRACE, f"Fetching GPS information for image {file_path.name}")

        gps_info = self._read_gps_ifd(file_path)

        record = GPSRecord()
        for tag, name in GPS_TAG_FIELDS:
            if tag not in gps_info:
                continue

            raw = gps_info[tag]
            tag_name = ExifTags.GPSTAGS.get(tag, tag)
            value = to_field_value(raw)

            if value is None or not isinstance(value, FIELD_TYPES[name]):
                self.logger.error(f"Invalid value encountered for tag {tag_name} in {file_path.name}: {raw!r}")
                continue

            record.assign(name, value)
            self.logger.debug(f"Decoded {tag_name} for {file_path.name}: {value}")

        return record

    def _read_gps_ifd(self, file_path: Path) -> dict:
        try:
            with _without_pixel_limit(), Image.open(file_path) as image:
                exif = image.getexif()
                if not exif:
                    raise UnreadableImageError(file_path, "no EXIF metadata found")
                return dict(exif.get_ifd(ExifTags.IFD.GPSInfo))
        except UnidentifiedImageError as e:
            raise UnreadableImageError(file_path, f"unsupported or corrupt image ({e})") from e
        except (OSError, SyntaxError, ValueError, struct.error) as e:
            # Pillow reports malformed EXIF blocks with any of these
            raise UnreadableImageError(file_path, str(e)) from e


def get_gps_information(file_path, log: Optional[logging.Logger] = None) -> GPSRecord:
    return GPSTagDecoder(log).decode(file_path)
