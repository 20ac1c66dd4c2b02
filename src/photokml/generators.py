import html

from lxml import etree

from .constants import KML_NAMESPACE, KML_INDENT
from .exceptions import KmlSerializationError
from .models import GPSRecord


def _kml(tag: str) -> str:
    return f"{{{KML_NAMESPACE}}}{tag}"


class KmlDocumentGenerator:
    """
    Builds a KML document in memory: a ``kml`` root in the OGC namespace, one
    ``Document`` container named after the output file, and one ``Placemark``
    per call to ``add_placemark``, kept in call order.
    """

    def __init__(self, name: str):
        self.root = etree.Element(_kml("kml"), nsmap={None: KML_NAMESPACE})
        self.document = etree.SubElement(self.root, _kml("Document"))
        self.placemark_count = 0
        try:
            self._add_text(self.document, "name", name)
        except ValueError as e:
            raise KmlSerializationError(f"invalid document name {name!r}: {e}") from e

    def add_placemark(self, placemark_name, filename: str, record: GPSRecord) -> None:
        altitude = record.formatted("alt")
        longitude = record.formatted("lon")
        latitude = record.formatted("lat")

        # Data: File, Longitude, Latitude, Altitude
        table_html = f"""
        <table border="1" style="border-collapse: collapse; width: 100%;">
            <tr><td><b>Filename</b></td><td>{html.escape(filename)}</td></tr>
            <tr><td><b>Longitude</b></td><td>{longitude}</td></tr>
            <tr><td><b>Latitude</b></td><td>{latitude}</td></tr>
            <tr><td><b>Altitude [m]</b></td><td>{altitude}</td></tr>
        </table>
        """

        placemark = etree.SubElement(self.document, _kml("Placemark"))
        try:
            self._add_text(placemark, "name", str(placemark_name))
            description = etree.SubElement(placemark, _kml("description"))
            description.text = etree.CDATA(table_html)
            point = etree.SubElement(placemark, _kml("Point"))
            self._add_text(point, "coordinates", f"{longitude},{latitude},{altitude}")
        except ValueError as e:
            self.document.remove(placemark)
            raise KmlSerializationError(f"placemark for {filename!r}: {e}") from e

        self.placemark_count += 1

    def to_bytes(self) -> bytes:
        """Serializes the document with an XML declaration, UTF-8 encoded and indented."""
        etree.indent(self.root, space=KML_INDENT)
        try:
            return etree.tostring(self.root, xml_declaration=True, encoding="UTF-8")
        except (etree.SerialisationError, ValueError) as e:
            raise KmlSerializationError(str(e)) from e

    @staticmethod
    def _add_text(parent, tag: str, text: str):
        element = etree.SubElement(parent, _kml(tag))
        element.text = text
        return element
