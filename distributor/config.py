"""Application configuration via Pydantic Settings.

NOTE: We explicitly map .env variable names (YANDEX_GEOCODER_API_KEY,
HOME_COUNTRIES, FOREIGN_OFFICE_IDS, etc.) to avoid silent misconfiguration.
List values are read from the environment as JSON arrays.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geocoder
    geocoder_provider: str = Field(default="yandex", validation_alias="GEOCODER_PROVIDER")
    yandex_geocoder_api_key: str = Field(default="", validation_alias="YANDEX_GEOCODER_API_KEY")
    geocoder_user_agent: str = Field(
        default="client-distributor",
        validation_alias="GEOCODER_USER_AGENT",
    )
    geocoder_language: str = Field(default="ru_RU", validation_alias="GEOCODER_LANGUAGE")
    geocoder_timeout: float = Field(default=10.0, validation_alias="GEOCODER_TIMEOUT")
    geocoder_max_concurrency: int = Field(default=8, ge=1, validation_alias="GEOCODER_MAX_CONCURRENCY")

    # Distribution rules
    home_countries: list[str] = Field(
        default=["Казахстан", "Kazahstan"],
        validation_alias="HOME_COUNTRIES",
    )
    foreign_office_ids: list[str] = Field(
        default=["Отдел 1", "Отдел 2"],
        validation_alias="FOREIGN_OFFICE_IDS",
    )

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    csv_data_path: str = Field(default="data", validation_alias="CSV_DATA_PATH")
    result_path: str = Field(default="result.json", validation_alias="RESULT_PATH")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
