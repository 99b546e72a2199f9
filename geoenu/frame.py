"""
Local East-North-Up reference frame anchored at a geodetic origin
"""

__all__ = ['LocalFrame']

import math
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike
from pydantic import validate_call

from geoenu._const import WGS84_A, WGS84_B
from geoenu.points import GeodeticPoint, LocalPoint
from geoenu.utils.functions import is_finite
from geoenu.utils.logging import LOGGER, warn_once


# Parallels shorter than this (meters) are treated as a pole
_POLE_TOLERANCE = 1e-3


def _divide(numerator: float, denominator: float) -> float:
    """Float division following IEEE-754 rules (x/0 -> +/-inf, 0/0 -> nan) instead of raising"""
    if denominator:
        return numerator / denominator

    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def _sin_cos(radians: float) -> Tuple[float, float]:
    """Sine and cosine of an angle; infinite angles give nan rather than raising"""
    if math.isinf(radians):
        return math.nan, math.nan

    return math.sin(radians), math.cos(radians)


def _as_points_array(points: ArrayLike) -> np.ndarray:
    """Coerce an array-like of 3-vectors to a float64 array of shape (3,) or (N, 3)"""
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim not in (1, 2) or arr.shape[-1] != 3:
        raise ValueError(
            f'Expected an array of shape (3,) or (N, 3), received shape {arr.shape}'
        )
    return arr


class LocalFrame:
    """
    A local tangent-plane (East-North-Up) frame anchored at a geodetic origin.

    The effective earth radius at the origin is computed once, on construction, and reused
    by every conversion. Conversions are a linear approximation of the ellipsoid around the
    origin: accuracy degrades as points move away from it.

    Frames are immutable and may be shared freely, including across threads.
    """

    __slots__ = ('_origin', '_radius', '_r_cos')

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, origin: GeodeticPoint):
        lat = math.radians(origin.latitude)
        sin, cos = _sin_cos(lat)

        # Ellipsoid radius at the origin's latitude, raised to the origin's altitude
        radius = math.hypot(WGS84_A * cos, WGS84_B * sin) + origin.altitude

        object.__setattr__(self, '_origin', origin)
        object.__setattr__(self, '_radius', radius)
        object.__setattr__(self, '_r_cos', radius * cos)

        self._log_diagnostics()

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return self.__class__, (self.origin,)

    def __eq__(self, other):
        if not isinstance(other, LocalFrame):
            return False

        return self.origin == other.origin

    def __hash__(self):
        return hash(self.origin)

    def __repr__(self):
        return f'<LocalFrame at {self.origin!r}>'

    @classmethod
    def from_origin(cls, origin: GeodeticPoint) -> 'LocalFrame':
        """Creates a LocalFrame anchored at origin"""
        return cls(origin)

    @property
    def origin(self) -> GeodeticPoint:
        """The geodetic point at which east, north and up are all zero"""
        return self._origin

    @property
    def radius(self) -> float:
        """Effective earth radius at the origin (including origin altitude), in meters"""
        return self._radius

    @property
    def r_cos(self) -> float:
        """Radius of the origin's parallel, used to scale longitude offsets, in meters"""
        return self._r_cos

    def _log_diagnostics(self):
        if not is_finite(self.origin.to_float()):
            warn_once(
                f'LocalFrame origin {self.origin!r} contains non-finite values; '
                'conversions will produce non-finite results.'
            )
        elif not -90 <= self.origin.latitude <= 90:
            warn_once(
                f'LocalFrame origin latitude {self.origin.latitude} is outside [-90, 90]; '
                'conversions will not be physically meaningful.'
            )

        if math.isclose(self.r_cos, 0, abs_tol=_POLE_TOLERANCE):
            warn_once(
                f'LocalFrame origin {self.origin!r} has a zero-length parallel '
                f'(r_cos={self.r_cos}); '
                'east offsets cannot be converted back to longitudes.'
            )

        LOGGER.debug(
            'LocalFrame at %r: radius=%s, r_cos=%s', self.origin, self.radius, self.r_cos
        )

    def geodetic_to_local(self, point: GeodeticPoint) -> LocalPoint:
        """
        Convert a geodetic point to its east/north/up offset from the origin.

        Args:
            point:
                The GeodeticPoint to convert

        Returns:
            LocalPoint, in meters
        """
        d_latitude = point.latitude - self._origin.latitude
        d_longitude = point.longitude - self._origin.longitude
        d_altitude = point.altitude - self._origin.altitude

        return LocalPoint(
            self._r_cos * math.radians(d_longitude),
            self._radius * math.radians(d_latitude),
            d_altitude,
        )

    def local_to_geodetic(self, point: LocalPoint) -> GeodeticPoint:
        """
        Convert an east/north/up offset from the origin back to a geodetic point. This is the
        exact inverse of geodetic_to_local() for the same frame.

        Args:
            point:
                The LocalPoint to convert

        Returns:
            GeodeticPoint
        """
        d_latitude = math.degrees(_divide(point.north, self._radius))
        d_longitude = math.degrees(_divide(point.east, self._r_cos))

        return GeodeticPoint(
            self._origin.latitude + d_latitude,
            self._origin.longitude + d_longitude,
            self._origin.altitude + point.up,
        )

    def geodetic_to_local_array(self, points: ArrayLike) -> np.ndarray:
        """
        Vectorized geodetic_to_local().

        Args:
            points:
                Array-like of shape (3,) or (N, 3), with columns (latitude, longitude, altitude)

        Returns:
            np.ndarray of the same shape, with columns (east, north, up)
        """
        arr = _as_points_array(points)
        out = np.empty_like(arr)
        out[..., 0] = self._r_cos * np.radians(arr[..., 1] - self._origin.longitude)
        out[..., 1] = self._radius * np.radians(arr[..., 0] - self._origin.latitude)
        out[..., 2] = arr[..., 2] - self._origin.altitude
        return out

    def local_to_geodetic_array(self, points: ArrayLike) -> np.ndarray:
        """
        Vectorized local_to_geodetic().

        Args:
            points:
                Array-like of shape (3,) or (N, 3), with columns (east, north, up)

        Returns:
            np.ndarray of the same shape, with columns (latitude, longitude, altitude)
        """
        arr = _as_points_array(points)
        out = np.empty_like(arr)
        with np.errstate(divide='ignore', invalid='ignore'):
            out[..., 0] = self._origin.latitude + np.degrees(arr[..., 1] / self._radius)
            out[..., 1] = self._origin.longitude + np.degrees(arr[..., 0] / self._r_cos)
        out[..., 2] = self._origin.altitude + arr[..., 2]
        return out
