import pytest

from geoenu import GeodeticPoint, LocalFrame, LocalPoint
from geoenu.conversion import *

from tests.functions import assert_geodetic_equal


def test_make_frame():
    origin = GeodeticPoint(31.2304, 121.4737, 10.)
    frame = make_frame(origin)

    assert isinstance(frame, LocalFrame)
    assert frame.origin == origin
    assert frame == LocalFrame(origin)


def test_geodetic_to_local():
    frame = make_frame(GeodeticPoint(31.2304, 121.4737, 10.))

    assert geodetic_to_local(frame, frame.origin) == LocalPoint(0., 0., 0.)

    point = GeodeticPoint(31.2404, 121.4837, 25.)
    assert geodetic_to_local(frame, point) == frame.geodetic_to_local(point)


def test_local_to_geodetic():
    frame = make_frame(GeodeticPoint(31.2304, 121.4737, 10.))

    assert local_to_geodetic(frame, LocalPoint(0., 0., 0.)) == frame.origin

    point = LocalPoint(-320., 1500., -4.)
    assert local_to_geodetic(frame, point) == frame.local_to_geodetic(point)


def test_shanghai_scenario():
    frame = make_frame(GeodeticPoint(31.2304, 121.4737, 10.))
    actual = geodetic_to_local(frame, GeodeticPoint(31.2404, 121.4737, 10.))

    assert actual.east == pytest.approx(0., abs=1e-9)
    assert actual.north == pytest.approx(1111., abs=5.)
    assert actual.up == 0.

    assert_geodetic_equal(
        local_to_geodetic(frame, actual),
        GeodeticPoint(31.2404, 121.4737, 10.)
    )
