from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_PATH = Path(__file__).parent / "zips.json.bz2"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ZIPCODES_", extra="ignore")

    data_path: Path = DEFAULT_DATA_PATH
    log_level: str = "WARNING"


config = Config(_env_file=".env", _env_file_encoding="utf-8")
