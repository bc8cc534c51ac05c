import pytest
import structlog

from vk_photo_guard import yaml_config
from vk_photo_guard.photo_domains import load_photo_domains


@pytest.fixture(autouse=True)
def log_output():
    """Capture structlog events instead of printing them."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point yaml_config at a temporary config.yml written by the test."""
    path = tmp_path / "config.yml"
    monkeypatch.setattr(yaml_config, "_CONFIG_PATH", path)
    monkeypatch.setattr(yaml_config, "_cache", None)
    load_photo_domains.cache_clear()
    yield path
    load_photo_domains.cache_clear()
