from geoenu._version import __version__  # noqa: F401
from geoenu.utils.logging import LOGGER
from geoenu.points import GeodeticPoint, LocalPoint
from geoenu.frame import LocalFrame
from geoenu.conversion import geodetic_to_local, local_to_geodetic, make_frame


__all__ = [
    'GeodeticPoint',
    'LocalFrame',
    'LocalPoint',
    'geodetic_to_local',
    'local_to_geodetic',
    'make_frame',
    'LOGGER',
]
