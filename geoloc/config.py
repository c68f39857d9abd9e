"""Library configuration via Pydantic Settings.

NOTE: Environment variable names are mapped explicitly (GEOLOC_DEFAULT_FORMAT,
GEOLOC_LOG_LEVEL, DEBUG) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from geoloc.domain.value_objects.enums import CoordinateFormat


class Settings(BaseSettings):
    # Formatting
    default_coordinate_format: CoordinateFormat = Field(
        default=CoordinateFormat.DECIMAL,
        validation_alias="GEOLOC_DEFAULT_FORMAT",
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="GEOLOC_LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()
