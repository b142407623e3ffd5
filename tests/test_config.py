# tests/test_config.py
import json

import pytest

from ar_core.config import AppConfig
from ar_core.models.settings import AppSettings


def test_defaults_without_file():
    cfg = AppConfig()
    assert cfg.get('trusted_url_prefix') == 'https://www.youtube.com/'
    assert cfg.get('required_fields') == ['x', 'y', 'width', 'height', 'timeStart', 'timeEnd']
    assert cfg.get('update_interval_ms') == 1000
    assert cfg.get('missing', 'fallback') == 'fallback'


def test_missing_file_is_created(tmp_path):
    path = tmp_path / 'settings.json'
    AppConfig(path)
    assert json.loads(path.read_text(encoding='utf-8'))['log_level'] == 'INFO'


def test_partial_file_filled_from_defaults(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text(json.dumps({'update_interval_ms': 250}), encoding='utf-8')

    cfg = AppConfig(path)
    assert cfg.get('update_interval_ms') == 250
    assert cfg.get('trusted_url_prefix') == 'https://www.youtube.com/'
    assert 'trusted_url_prefix' in json.loads(path.read_text(encoding='utf-8'))


def test_corrupt_file_falls_back(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text('{not json', encoding='utf-8')
    assert AppConfig(path).get('update_interval_ms') == 1000


def test_set_and_save(tmp_path):
    path = tmp_path / 'settings.json'
    cfg = AppConfig(path)
    cfg.set('trusted_url_prefix', 'https://mirror.example.org/')
    cfg.save()
    assert AppConfig(path).get('trusted_url_prefix') == 'https://mirror.example.org/'


def test_to_settings():
    cfg = AppConfig()
    cfg.set('required_fields', ['timeStart', 'timeEnd'])
    cfg.set('log_level', 'debug')
    settings = cfg.to_settings()
    assert isinstance(settings, AppSettings)
    assert settings.required_fields == ('timeStart', 'timeEnd')
    assert settings.log_level == 'DEBUG'
    assert settings.to_dict()['required_fields'] == ['timeStart', 'timeEnd']


def test_settings_from_empty_dict():
    settings = AppSettings.from_config({})
    assert settings.trusted_url_prefix == 'https://www.youtube.com/'
    assert settings.required_fields == ('x', 'y', 'width', 'height', 'timeStart', 'timeEnd')
    assert settings.update_interval_ms == 1000


@pytest.mark.parametrize('value', ['fast', None, 0, -5, [250]])
def test_bad_interval_falls_back(value):
    assert AppSettings.from_config({'update_interval_ms': value}).update_interval_ms == 1000


def test_numeric_string_interval_accepted():
    assert AppSettings.from_config({'update_interval_ms': '250'}).update_interval_ms == 250


def test_bad_required_fields_fall_back():
    settings = AppSettings.from_config({'required_fields': 'x'})
    assert settings.required_fields == ('x', 'y', 'width', 'height', 'timeStart', 'timeEnd')
