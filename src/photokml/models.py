from dataclasses import dataclass, field
from typing import Set, Union


@dataclass(frozen=True)
class CharValue:
    """Single character, used for hemisphere references ('N', 'S', 'E', 'W')."""
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class FloatValue:
    """Decimal value: angles in degrees and altitude in meters."""
    value: float

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class IntValue:
    """Unsigned byte, used for the altitude reference (0 above, 1 below sea level)."""
    value: int

    def __str__(self):
        return str(self.value)


GPSFieldValue = Union[CharValue, FloatValue, IntValue]

FIELD_NAMES = ("altitude", "altitude_ref", "latitude", "latitude_ref", "longitude", "longitude_ref")
REQUIRED_FIELDS = ("latitude", "latitude_ref", "longitude", "longitude_ref")

# Variant each field holds by convention
FIELD_TYPES = {
    "altitude": FloatValue,
    "altitude_ref": IntValue,
    "latitude": FloatValue,
    "latitude_ref": CharValue,
    "longitude": FloatValue,
    "longitude_ref": CharValue,
}

PARAM_ALIASES = {
    "alt": "altitude",
    "altitude": "altitude",
    "lat": "latitude",
    "latitude": "latitude",
    "lon": "longitude",
    "longitude": "longitude",
}


@dataclass
class GPSRecord:
    """GPS tags decoded from one image.

    Every slot starts at a zero-equivalent default. ``observed`` remembers
    which slots were assigned, so a field explicitly set to its default value
    is still told apart from a field that was never found.
    """
    altitude: GPSFieldValue = FloatValue(0.0)
    altitude_ref: GPSFieldValue = IntValue(0)
    latitude: GPSFieldValue = FloatValue(0.0)
    latitude_ref: GPSFieldValue = CharValue("\0")
    longitude: GPSFieldValue = FloatValue(0.0)
    longitude_ref: GPSFieldValue = CharValue("\0")
    observed: Set[str] = field(default_factory=set)

    def assign(self, name: str, value: GPSFieldValue) -> None:
        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown GPS field: {name}")
        setattr(self, name, value)
        self.observed.add(name)

    def is_observed(self, name: str) -> bool:
        return name in self.observed

    def is_valid(self) -> bool:
        return all(name in self.observed for name in REQUIRED_FIELDS)

    def formatted(self, param: str) -> str:
        """
        Returns a display string for altitude (2 decimals) or latitude and
        longitude (6 decimals, signed). Latitude is negative in the southern
        hemisphere and longitude is negative west of Greenwich.

        Raises ValueError for any other parameter name.
        """
        name = PARAM_ALIASES.get(param)
        if name is None:
            raise ValueError(f"Unknown GPS parameter requested: {param}")

        if name == "altitude":
            return f"{self.altitude.value:.2f}"

        if name == "latitude":
            value = self.latitude.value
            negative = self._ref_is(self.latitude_ref, "S")
        else:
            value = self.longitude.value
            negative = self._ref_is(self.longitude_ref, "W")

        if negative:
            value = -value
        return f"{value:.6f}"

    @staticmethod
    def _ref_is(ref: GPSFieldValue, letter: str) -> bool:
        return isinstance(ref, CharValue) and ref.value.upper() == letter
