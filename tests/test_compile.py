

def test_compile():
    import geoenu
    import geoenu.conversion
    import geoenu.frame
    import geoenu.points
    import geoenu.utils.functions
    import geoenu.utils.logging

    assert geoenu.__version__
