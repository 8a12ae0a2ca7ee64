from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, ClassVar
import os


class Settings(BaseSettings):
    APP_NAME: str = "river-flooding-twin"
    LOG_LEVEL: str = "INFO"

    # Catchment weather feed (Trimbakeshwar catchment above Gangapur Dam)
    OPENWEATHER_API_KEY: Optional[str] = None
    OPENWEATHER_URL: str = "https://api.openweathermap.org/data/2.5"
    CATCHMENT_LAT: float = 19.9392
    CATCHMENT_LON: float = 73.5307
    WEATHER_TIMEOUT_S: float = 10.0
    FALLBACK_RAIN_MM_HR: float = 4.2  # historical monsoon average

    env_path: ClassVar[str] = os.path.join(os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), ".env")
    model_config = SettingsConfigDict(env_file=env_path, extra="ignore")


settings = Settings()
