"""
Representation of geodetic points and local east/north/up offsets
"""

__all__ = ['GeodeticPoint', 'LocalPoint']

import math
from typing import Iterator, Tuple, Union

from geoenu.utils.functions import round_half_up

_Number = Union[float, int, str]


class GeodeticPoint:
    """
    A point on the WGS84 ellipsoid, as latitude and longitude (degrees) and altitude (meters).

    Values are stored as given. Latitudes outside [-90, 90] and unbounded longitudes are
    neither rejected nor wrapped; keeping inputs physically meaningful is the caller's job.
    """

    __slots__ = ('_latitude', '_longitude', '_altitude')

    def __init__(
        self,
        latitude: _Number,
        longitude: _Number,
        altitude: _Number = 0.0,
    ):
        object.__setattr__(self, '_latitude', float(latitude))
        object.__setattr__(self, '_longitude', float(longitude))
        object.__setattr__(self, '_altitude', float(altitude))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return self.__class__, self.to_float()

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.altitude == other.altitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.altitude))

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_float())

    def __repr__(self):
        return f'<GeodeticPoint({self.latitude}, {self.longitude}, {self.altitude})>'

    @property
    def latitude(self) -> float:
        """Latitude, in degrees"""
        return self._latitude

    @property
    def longitude(self) -> float:
        """Longitude, in degrees"""
        return self._longitude

    @property
    def altitude(self) -> float:
        """Altitude above the ellipsoid, in meters"""
        return self._altitude

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[int, int, float, str],
        lon: Tuple[int, int, float, str],
        altitude: _Number = 0.0,
    ):
        """
        Creates a GeodeticPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

            altitude:
                (Default 0.0) Altitude in meters

        Returns:
            GeodeticPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lat), convert(lon), altitude)

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert latitude and longitude to tuples of degrees, minutes, seconds, hemisphere

        A non-finite component (nan or +/- inf) is returned as that value in all three
        degree, minute and second positions.

        Returns:
            converted values as ((lat dms), (lon dms))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            if not math.isfinite(dd):
                return abs(dd), abs(dd), abs(dd)

            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            seconds = round_half_up(seconds, 5)

            # Rounding can push seconds up to a full minute
            if seconds >= 60:
                seconds, minutes = 0.0, minutes + 1
            if minutes >= 60:
                minutes, degrees = 0, degrees + 1

            return int(degrees), int(minutes), seconds

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float, float]:
        """Returns (latitude, longitude, altitude)"""
        return self.latitude, self.longitude, self.altitude

    def to_str(self) -> Tuple[str, str, str]:
        """Returns (latitude, longitude, altitude) as strings"""
        return str(self.latitude), str(self.longitude), str(self.altitude)


class LocalPoint:
    """
    An east/north/up offset, in meters, relative to the origin of some LocalFrame.

    The point carries no reference to its frame; it is only meaningful alongside the
    frame that produced it.
    """

    __slots__ = ('_east', '_north', '_up')

    def __init__(
        self,
        east: _Number,
        north: _Number,
        up: _Number = 0.0,
    ):
        object.__setattr__(self, '_east', float(east))
        object.__setattr__(self, '_north', float(north))
        object.__setattr__(self, '_up', float(up))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return self.__class__, self.to_float()

    def __eq__(self, other):
        if not isinstance(other, LocalPoint):
            return False

        return (
            self.east == other.east and
            self.north == other.north and
            self.up == other.up
        )

    def __hash__(self):
        return hash((self.east, self.north, self.up))

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_float())

    def __repr__(self):
        return f'<LocalPoint({self.east}, {self.north}, {self.up})>'

    def __add__(self, other):
        if not isinstance(other, LocalPoint):
            return NotImplemented

        return LocalPoint(self.east + other.east, self.north + other.north, self.up + other.up)

    def __sub__(self, other):
        if not isinstance(other, LocalPoint):
            return NotImplemented

        return LocalPoint(self.east - other.east, self.north - other.north, self.up - other.up)

    def __neg__(self):
        return LocalPoint(-self.east, -self.north, -self.up)

    @property
    def east(self) -> float:
        """Offset towards the east, in meters"""
        return self._east

    @property
    def north(self) -> float:
        """Offset towards the north, in meters"""
        return self._north

    @property
    def up(self) -> float:
        """Offset away from the earth's center, in meters"""
        return self._up

    @property
    def horizontal_distance(self) -> float:
        """Distance from the origin within the tangent plane, in meters"""
        return math.hypot(self.east, self.north)

    @property
    def distance(self) -> float:
        """Straight-line distance from the origin, in meters"""
        return math.hypot(self.east, self.north, self.up)

    @property
    def bearing_degrees(self) -> float:
        """
        The bearing from the origin to this point, clockwise from north, in [0, 360).
        The zero offset has a bearing of 0.
        """
        bearing = (math.degrees(math.atan2(self.east, self.north)) + 360) % 360
        return 0.0 if bearing == 360 else bearing

    def to_float(self) -> Tuple[float, float, float]:
        """Returns (east, north, up)"""
        return self.east, self.north, self.up

    def to_str(self) -> Tuple[str, str, str]:
        """Returns (east, north, up) as strings"""
        return str(self.east), str(self.north), str(self.up)
