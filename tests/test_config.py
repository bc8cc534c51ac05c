from vk_photo_guard import yaml_config
from vk_photo_guard.config import Settings


def test_defaults_come_from_bundled_config():
    settings = Settings()
    assert settings.profile_photo_field == "photo_200"
    assert settings.avatar_placeholder == "/images/avatar-placeholder.jpg"
    assert settings.log_level == "info"


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PHOTO_GUARD_AVATAR_PLACEHOLDER", "/static/empty.png")
    monkeypatch.setenv("PHOTO_GUARD_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.avatar_placeholder == "/static/empty.png"
    assert settings.log_level == "debug"


def test_missing_config_file_gives_empty_defaults(config_file):
    assert not config_file.exists()
    assert yaml_config.get_defaults() == {}


def test_output_strings_are_bundled():
    strings = yaml_config.get_output_strings()
    assert {"summary_header", "stats_template", "allowed_label", "rejected_label"} <= strings.keys()
