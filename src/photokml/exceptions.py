# src/photokml/exceptions.py


class PhotoKmlError(Exception):
    """Base class for every error raised by photokml."""

    pass


class UnreadableImageError(PhotoKmlError):
    """Raised when an image cannot be opened or its EXIF container cannot be parsed."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read metadata from {path}: {reason}")


class KmlSerializationError(PhotoKmlError):
    """Raised when the KML document cannot be serialized."""

    def __init__(self, detail):
        super().__init__(f"Failed to serialize KML document: {detail}")
