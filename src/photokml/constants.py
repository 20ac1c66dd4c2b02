from PIL import ExifTags

# --- Input Discovery ---
# Lowercase, without the leading dot
IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "tiff", "tif", "webp", "heif", "heic", "avif"}

# --- EXIF GPS Tags ---
# Queried in this order for every image
GPS_TAG_FIELDS = (
    (ExifTags.GPS.GPSAltitude, "altitude"),
    (ExifTags.GPS.GPSAltitudeRef, "altitude_ref"),
    (ExifTags.GPS.GPSLatitude, "latitude"),
    (ExifTags.GPS.GPSLatitudeRef, "latitude_ref"),
    (ExifTags.GPS.GPSLongitude, "longitude"),
    (ExifTags.GPS.GPSLongitudeRef, "longitude_ref"),
)

# --- KML Generation ---
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"
KML_INDENT = "    "

# --- Logging ---
TRACE = 5
LOG_LEVELS = ["off", "error", "warning", "info", "debug", "trace"]
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 5
