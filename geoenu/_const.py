"""
Constants declarations for geoenu
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_INV_F = 298.257223563  # Inverse flattening
WGS84_F = 1 / WGS84_INV_F  # Flattening
WGS84_B = WGS84_A - WGS84_A / WGS84_INV_F  # Minor axis (meters)
