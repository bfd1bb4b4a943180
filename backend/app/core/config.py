from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)

    app_name: str = "YatraBooking"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    data_dir: Path = Field(DEFAULT_DATA_DIR, validation_alias="DATA_DIR")
    hotels_file: str = Field("hotels.json", validation_alias="HOTELS_FILE")
    cities_file: str = Field("cities.json", validation_alias="CITIES_FILE")

    @property
    def hotels_path(self) -> Path:
        return self.data_dir / self.hotels_file

    @property
    def cities_path(self) -> Path:
        return self.data_dir / self.cities_file


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
