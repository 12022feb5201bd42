import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'deploy_streamlit'))

from ecomap.config import DATASETS  # noqa: E402


def _square(lon, lat, size=0.1):
    return [[
        [lon, lat],
        [lon + size, lat],
        [lon + size, lat + size],
        [lon, lat + size],
        [lon, lat],
    ]]


def _polygon(lon, lat, size=0.1):
    return {'type': 'Polygon', 'coordinates': _square(lon, lat, size)}


def _feature(geometry, **properties):
    return {'type': 'Feature', 'geometry': geometry, 'properties': properties}


SAMPLE_FEATURES = {
    'plants': [
        _feature(_polygon(-157.9, 21.4), density='L', st_areashape=1234.5678, st_perimetershape=150.0),
        _feature(
            {'type': 'MultiPolygon', 'coordinates': [_square(-156.3, 20.8), _square(-156.1, 20.7)]},
            density='VH', st_areashape=99.0, st_perimetershape=40.25,
        ),
        _feature(_polygon(-155.5, 19.6), st_areashape=10.0, st_perimetershape=12.0),
    ],
    'habitat': [
        _feature(_polygon(-158.0, 21.5), island='Oahu', critical_h='Kaala', acres=2500.0,
                 st_areashape=10117.0, st_perimetershape=402.0),
        _feature(_polygon(-160.1, 21.9), island='Niihau', critical_h='Paniau', acres=120.5,
                 st_areashape=487.0, st_perimetershape=88.0),
    ],
    'urban': [
        _feature(_polygon(-157.85, 21.3), GEOID20='89770', NAMELSAD20='Urban Honolulu, HI Urbanized Area',
                 POP=853252, POPDEN=5432.1),
        _feature(_polygon(-156.5, 20.9), GEOID20='43700', NAME20='Kahului, HI'),
    ],
    'roads': [
        _feature({'type': 'LineString', 'coordinates': [[-157.9, 21.3], [-157.8, 21.35]]}, route='H-1'),
        _feature({'type': 'MultiLineString', 'coordinates': [[[-156.5, 20.9], [-156.4, 20.85]]]}, route='HI-30'),
    ],
    'hotels': [
        _feature({'type': 'Point', 'coordinates': [-157.8268, 21.2767]}, hotel_name='Moana Surfrider', island='Oahu'),
        _feature({'type': 'Point', 'coordinates': [-156.6946, 20.9189]}, NAME='Kaanapali Beach Hotel', island='Maui'),
        _feature({'type': 'Point', 'coordinates': [-155.8781, 19.9353]}, island='Hawaii'),
    ],
    'lulc': [
        _feature(_polygon(-157.9, 21.35), landcover=11, st_areashape=5000.0),
        _feature(_polygon(-155.3, 19.7), landcover=42, st_areashape=90000.25),
        _feature(_polygon(-159.5, 22.0), landcover=99, st_areashape=1.0),
    ],
    'parks': [
        _feature(_polygon(-157.8, 21.26, 0.02), name='Diamond Head State Monument', type_defin='State Monument',
                 island='Oahu', gis_acre=475.21),
    ],
}


def write_dataset(directory: Path, key: str, features) -> Path:
    path = directory / DATASETS[key]['file']
    path.write_text(json.dumps({'type': 'FeatureCollection', 'features': features}))
    return path


@pytest.fixture
def dataset_dir(tmp_path):
    for key, features in SAMPLE_FEATURES.items():
        write_dataset(tmp_path, key, features)
    return tmp_path


@pytest.fixture
def loaded(dataset_dir):
    from ecomap.datasets import load_all

    result = load_all(data_dir=dataset_dir)
    assert result.ok, result.errors
    return result.frames
