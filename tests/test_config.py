import importlib
import logging

import pytest
from unittest.mock import patch

from previsao_ileso import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under a patched environment, then restore it."""
    for name in ("API_BASE_URL", "ILESO_REQUEST_TIMEOUT", "ILESO_HIGHWAY_INPUT",
                 "ILESO_STRICT_CHOICES", "ILESO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    cfg = reload_config()

    assert cfg.PREDICT_URL == (
        "https://backend-aprendizado-de-maquinas-production.up.railway.app/prever"
    )
    assert cfg.REQUEST_TIMEOUT == 20.0
    assert cfg.HIGHWAY_INPUT == "numeric"
    assert cfg.STRICT_CHOICES is False
    assert cfg.LOG_LEVEL == "INFO"


def test_environment_overrides(reload_config):
    cfg = reload_config(
        API_BASE_URL="http://127.0.0.1:8000/",
        ILESO_REQUEST_TIMEOUT="5",
        ILESO_HIGHWAY_INPUT="Catalog",
        ILESO_STRICT_CHOICES="yes",
        ILESO_LOG_LEVEL="debug",
    )

    assert cfg.PREDICT_URL == "http://127.0.0.1:8000/prever"
    assert cfg.REQUEST_TIMEOUT == 5.0
    assert cfg.HIGHWAY_INPUT == "catalog"
    assert cfg.STRICT_CHOICES is True
    assert cfg.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"ILESO_REQUEST_TIMEOUT": "soon"},
        {"ILESO_REQUEST_TIMEOUT": "0"},
        {"ILESO_HIGHWAY_INPUT": "map"},
    ],
)
def test_invalid_values_fail_at_import(reload_config, env):
    with pytest.raises(ValueError) as exc_info:
        reload_config(**env)
    assert list(env)[0] in str(exc_info.value)


def test_configure_logging_uses_level():
    with patch("previsao_ileso.config.logging.basicConfig") as basic_config:
        config.configure_logging("WARNING")

    basic_config.assert_called_once_with(level="WARNING", format="%(asctime)s - %(message)s")
