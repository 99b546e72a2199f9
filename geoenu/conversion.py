"""
Module-level conversion functions, for callers that prefer passing the frame explicitly
"""
__all__ = ['geodetic_to_local', 'local_to_geodetic', 'make_frame']

from geoenu.frame import LocalFrame
from geoenu.points import GeodeticPoint, LocalPoint


def make_frame(origin: GeodeticPoint) -> LocalFrame:
    """
    Builds a local east/north/up frame anchored at origin.

    Args:
        origin (GeodeticPoint): The point that maps to a zero local offset.

    Returns:
        LocalFrame
    """
    return LocalFrame(origin)


def geodetic_to_local(frame: LocalFrame, point: GeodeticPoint) -> LocalPoint:
    """
    Converts a geodetic point to an east/north/up offset from the frame's origin.

    Args:
        frame (LocalFrame): The frame to convert into.
        point (GeodeticPoint): The point to convert.

    Returns:
        LocalPoint: The offset in meters.
    """
    return frame.geodetic_to_local(point)


def local_to_geodetic(frame: LocalFrame, point: LocalPoint) -> GeodeticPoint:
    """
    Converts an east/north/up offset from the frame's origin to a geodetic point.

    Args:
        frame (LocalFrame): The frame the offset is expressed in.
        point (LocalPoint): The offset in meters.

    Returns:
        GeodeticPoint
    """
    return frame.local_to_geodetic(point)
