import pytest

from ocean_regions import OCEAN_REGIONS, UnknownRegionError, get_region, region_keys


EXPECTED_KEYS = ['arabian_sea', 'bay_of_bengal', 'indian_ocean', 'equatorial_indian', 'southern_ocean']


def test_region_keys_lists_all_five_regions():
    assert region_keys() == EXPECTED_KEYS


@pytest.mark.parametrize('key', EXPECTED_KEYS)
def test_bounds_are_south_west_then_north_east(key):
    region = get_region(key)
    assert region.key == key
    assert region.south < region.north
    assert region.contains(*region.center)


def test_arabian_sea_values():
    region = get_region('arabian_sea')
    assert region.name == 'Arabian Sea'
    assert region.bounds == ((8, 50), (27, 80))
    assert region.characteristics.avg_temp == 28.5
    assert region.characteristics.avg_salinity == 36.2
    assert region.characteristics.depth == 4652


def test_southern_ocean_keeps_half_longitude_band():
    region = get_region('southern_ocean')
    assert (region.west, region.east) == (0, 180)
    assert not region.contains(-55, -90)


@pytest.mark.parametrize('key', ['pacific_ocean', '', 'Arabian_Sea', None])
def test_unknown_region_raises(key):
    with pytest.raises(UnknownRegionError):
        get_region(key)


def test_unknown_region_error_is_a_key_error():
    with pytest.raises(KeyError, match='atlantic'):
        get_region('atlantic')


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        OCEAN_REGIONS['atlantic'] = get_region('indian_ocean')
