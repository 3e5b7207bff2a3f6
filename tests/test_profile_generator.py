import re
from datetime import timedelta

import numpy as np
import pytest

from ocean_regions import UnknownRegionError, get_region, region_keys
from profile_generator import (
    DepthSample,
    InvalidCountError,
    generate_profiles,
    generate_reference_dataset,
    synthesize_depth_profile,
)

TEMPERATURE_FLOORS = {
    'southern_ocean': -1,
    'arabian_sea': 3,
    'bay_of_bengal': 4,
    'equatorial_indian': 5,
    'indian_ocean': 2,
}

EXPECTED_DEPTHS = list(range(0, 2001, 25))


@pytest.mark.parametrize('parameter', ['temperature', 'salinity'])
@pytest.mark.parametrize('key', region_keys())
def test_profile_has_81_ascending_depths(parameter, key, rng):
    samples = synthesize_depth_profile(parameter, get_region(key), rng)

    assert len(samples) == 81
    assert [s.depth for s in samples] == EXPECTED_DEPTHS
    assert all(isinstance(s, DepthSample) for s in samples)
    assert all(s.qc == 1 for s in samples)


@pytest.mark.parametrize('key', region_keys())
def test_temperature_never_drops_below_region_floor(key):
    region = get_region(key)
    rng = np.random.default_rng(7)
    for _ in range(50):
        samples = synthesize_depth_profile('temperature', region, rng)
        assert min(s.value for s in samples) >= TEMPERATURE_FLOORS[key]


def test_deep_temperature_sits_on_the_floor(rng):
    samples = synthesize_depth_profile('temperature', get_region('arabian_sea'), rng)
    # 28.5 - (2000/150)*2.2 is far below 3
    assert samples[-1].value == 3.0


def test_values_are_rounded_to_two_decimals(rng):
    samples = synthesize_depth_profile('salinity', get_region('bay_of_bengal'), rng)
    for s in samples:
        assert round(s.value, 2) == s.value


def test_surface_temperature_stays_within_noise_band(rng):
    region = get_region('southern_ocean')
    for _ in range(20):
        surface = synthesize_depth_profile('temperature', region, rng)[0]
        assert 3.7 <= surface.value <= 4.7


@pytest.mark.parametrize('key, low, high', [
    ('bay_of_bengal', 33.8 - 1 - 0.8 - 0.15, 33.8 - 1 + 0.8 + 0.15),
    ('arabian_sea', 36.2 - 0.6 - 0.1, 36.2 + 0.6 + 0.1),
    ('southern_ocean', 34.7 - 0.3 - 0.075, 34.7 + 0.3 + 0.075),
    ('indian_ocean', 35.1 - 0.5 - 0.1, 35.1 + 0.5 + 0.1),
    ('equatorial_indian', 34.9 - 0.5 - 0.1, 34.9 + 0.5 + 0.1),
])
def test_salinity_stays_within_formula_envelope(key, low, high, rng):
    samples = synthesize_depth_profile('salinity', get_region(key), rng)
    assert all(low - 0.01 <= s.value <= high + 0.01 for s in samples)


def test_unknown_parameter_raises(rng):
    with pytest.raises(ValueError, match='pressure'):
        synthesize_depth_profile('pressure', get_region('indian_ocean'), rng)


def test_zero_count_returns_empty_list(rng):
    assert generate_profiles('indian_ocean', 0, rng=rng) == []


@pytest.mark.parametrize('key', region_keys())
def test_profiles_fall_inside_region(key, rng, now):
    region = get_region(key)
    profiles = generate_profiles(key, 12, rng=rng, now=now)

    assert len(profiles) == 12
    for p in profiles:
        assert region.contains(p.lat, p.lon)
        assert p.ocean == key
        assert len(p.temperature) == 81
        assert len(p.salinity) == 81


def test_float_ids_use_wmo_range(rng, now):
    profiles = generate_profiles('bay_of_bengal', 30, rng=rng, now=now)
    for p in profiles:
        assert re.fullmatch(r'WMO590\d{4}', p.float_id)


def test_dates_are_backdated_within_window(rng, now):
    profiles = generate_profiles('arabian_sea', 25, rng=rng, now=now, max_age_days=90)
    for p in profiles:
        assert now - timedelta(days=90) <= p.date <= now


def test_same_seed_gives_same_profiles(now):
    first = generate_profiles('equatorial_indian', 5, rng=np.random.default_rng(99), now=now)
    second = generate_profiles('equatorial_indian', 5, rng=np.random.default_rng(99), now=now)
    assert first == second


@pytest.mark.parametrize('count', [-1, 2.5, '3', True, None])
def test_invalid_count_raises(count, rng):
    with pytest.raises(InvalidCountError):
        generate_profiles('indian_ocean', count, rng=rng)


def test_numpy_integer_count_is_accepted(rng):
    assert len(generate_profiles('indian_ocean', np.int64(3), rng=rng)) == 3


def test_unknown_region_raises(rng):
    with pytest.raises(UnknownRegionError):
        generate_profiles('atlantic', 3, rng=rng)


def test_reference_dataset_covers_every_region(rng, now):
    profiles = generate_reference_dataset(rng=rng, now=now)

    counts = {key: 0 for key in region_keys()}
    for p in profiles:
        counts[p.ocean] += 1
        assert now - timedelta(days=365) <= p.date <= now

    assert counts == {
        'arabian_sea': 15,
        'bay_of_bengal': 15,
        'indian_ocean': 20,
        'equatorial_indian': 15,
        'southern_ocean': 15,
    }


def test_profile_to_dict_shape(rng, now):
    profile = generate_profiles('southern_ocean', 1, rng=rng, now=now)[0]
    data = profile.to_dict()

    assert data['floatId'] == profile.float_id
    assert data['date'] == profile.date.isoformat()
    assert data['location'] == {'lat': profile.lat, 'lon': profile.lon}
    assert len(data['profiles']['temp']) == 81
    assert data['profiles']['sal'][0] == {'depth': 0, 'value': profile.salinity[0].value, 'qc': 1}
