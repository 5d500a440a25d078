"""Library-wide defaults for the shadow configuration surface."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Default shadow options, overridable via ``SHADOWSTAG_*`` environment variables."""

    DEFAULT_BLUR_RADIUS: int = 1
    DEFAULT_DOWNSCALE_RATE: int = 4
    DEFAULT_ALPHA_PERCENT: int = 50
    DEFAULT_OFFSET: int = 0
    DEFAULT_BLUR_TYPE: int = 0  # platform native

    model_config = {"env_prefix": "SHADOWSTAG_"}


settings = Settings()
