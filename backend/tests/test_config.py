import importlib

import debategame.config
from debategame import create_app


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv('JUDGE_TIMEOUT_SEC', '4.5')
    monkeypatch.setenv('CORS_ORIGINS', 'https://debates.example')
    config = importlib.reload(debategame.config)
    try:
        assert config.Config.JUDGE_TIMEOUT_SEC == 4.5
        assert config.Config.CORS_ORIGINS == 'https://debates.example'
    finally:
        monkeypatch.undo()
        importlib.reload(debategame.config)


def test_create_app_defaults_to_package_config():
    assert create_app.__defaults__[0].__module__ == 'debategame.config'
