import importlib

from ecomap import config


def test_group_choices_follow_catalogue():
    assert config.group_choices(config.GROUP_ENVIRONMENTAL) == {
        'plants': 'Plant Layer',
        'habitat': 'Habitat Layer',
        'parks': 'State Parks',
    }
    assert list(config.group_choices(config.GROUP_HUMAN)) == ['urban', 'roads', 'hotels', 'lulc']


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('ECOMAP_DATA_DIR', 'https://example.org/datasets')
    monkeypatch.setenv('ECOMAP_MAX_WORKERS', '3')
    monkeypatch.setenv('ECOMAP_TILES', 'CartoDB positron')
    monkeypatch.setenv('ECOMAP_LOG_LEVEL', 'DEBUG')
    try:
        importlib.reload(config)

        assert config.DATA_DIR == 'https://example.org/datasets'
        assert config.MAX_WORKERS == 3
        assert config.TILES == 'CartoDB positron'
        assert config.LOG_LEVEL == 'DEBUG'
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_defaults_without_overrides(monkeypatch):
    for name in ('ECOMAP_DATA_DIR', 'ECOMAP_MAX_WORKERS', 'ECOMAP_TILES', 'ECOMAP_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    try:
        importlib.reload(config)

        assert config.DATA_DIR.endswith('datasets')
        assert config.MAX_WORKERS == 7
        assert config.TILES == 'OpenStreetMap'
        assert config.MAP_HEIGHT == 700
    finally:
        monkeypatch.undo()
        importlib.reload(config)
