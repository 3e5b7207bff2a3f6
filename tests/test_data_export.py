import io
import json

import pandas as pd
import pytest

from data_export import CSV_COLUMNS, export_result, profiles_to_dataframe, to_csv, to_json
from query_processor import run_query


@pytest.fixture
def result(rng, now):
    return run_query('Show temperature profiles in Arabian Sea', rng=rng, now=now)


def test_csv_round_trip(result):
    df = pd.read_csv(io.StringIO(to_csv(result)), dtype={'float_id': str, 'date': str, 'ocean': str})

    assert list(df.columns) == CSV_COLUMNS
    assert len(df) == len(result.profiles) * 81

    for i, profile in enumerate(result.profiles):
        rows = df.iloc[i * 81:(i + 1) * 81]
        assert (rows['float_id'] == profile.float_id).all()
        assert (rows['date'] == profile.date.strftime('%Y-%m-%d')).all()
        assert (rows['ocean'] == 'arabian_sea').all()
        assert rows['lat'].iloc[0] == pytest.approx(round(profile.lat, 4))
        assert rows['lon'].iloc[0] == pytest.approx(round(profile.lon, 4))
        assert rows['depth'].tolist() == [s.depth for s in profile.temperature]
        assert rows['temperature'].tolist() == pytest.approx([s.value for s in profile.temperature])
        assert rows['salinity'].tolist() == pytest.approx([s.value for s in profile.salinity])


def test_dataframe_of_no_profiles_keeps_columns():
    df = profiles_to_dataframe([])
    assert df.empty
    assert list(df.columns) == CSV_COLUMNS


def test_json_export_parses_back(result):
    data = json.loads(to_json(result))

    assert data['summary']['count'] == len(result.profiles)
    assert len(data['profiles']) == len(result.profiles)
    assert data['profiles'][0]['floatId'] == result.profiles[0].float_id
    assert data['floatLocations'][0]['id'] == result.profiles[0].float_id


@pytest.mark.parametrize('fmt, filename, mime', [
    ('json', 'argo_data.json', 'application/json'),
    ('csv', 'argo_data.csv', 'text/csv'),
])
def test_export_result_formats(result, fmt, filename, mime):
    content, name, content_type = export_result(result, fmt)
    assert (name, content_type) == (filename, mime)
    assert content


def test_export_result_rejects_unknown_format(result):
    with pytest.raises(ValueError):
        export_result(result, 'xlsx')
