from pytest import approx

from geoenu import GeodeticPoint, LocalPoint


def assert_geodetic_equal(p1: GeodeticPoint, p2: GeodeticPoint, abs_tol=1e-9):
    """
    Asserts that two geodetic points are equal within a specified absolute tolerance.

    Args:
        p1: The first GeodeticPoint
        p2: The second GeodeticPoint
        abs_tol: The absolute tolerance, applied to degrees and meters alike.
                 Default is 1e-9 (approx 0.1mm of latitude).
    """
    try:
        assert p1.latitude == approx(p2.latitude, abs=abs_tol)
        assert p1.longitude == approx(p2.longitude, abs=abs_tol)
        assert p1.altitude == approx(p2.altitude, abs=abs_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e


def assert_local_equal(p1: LocalPoint, p2: LocalPoint, abs_tol=1e-6):
    """
    Asserts that two local points are equal within a specified absolute tolerance, in meters.
    """
    try:
        assert p1.east == approx(p2.east, abs=abs_tol)
        assert p1.north == approx(p2.north, abs=abs_tol)
        assert p1.up == approx(p2.up, abs=abs_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e
