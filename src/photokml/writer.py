import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_kml(content: bytes, output_path) -> None:
    """
    Writes the serialized document to disk, creating missing parent folders.

    Errors from directory or file creation are raised to the caller unchanged.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "wb") as f:
        f.write(content)

    logger.debug(f"Successfully written {len(content)} bytes to file {output_path}")
