from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "PHOTO_GUARD_"}

    # Shown in place of a profile photo that fails the allow-list check
    avatar_placeholder: str = _defaults.get("avatar_placeholder", "/images/avatar-placeholder.jpg")

    # Column holding the profile photo URL in profile rows
    profile_photo_field: str = _defaults.get("profile_photo_field", "photo_200")

    log_level: str = _defaults.get("log_level", "info")


settings = Settings()
