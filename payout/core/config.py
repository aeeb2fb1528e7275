from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = Field("PayoutEstimator", description="Logger namespace prefix")
    LOG_LEVEL: str = Field("INFO", description="Level for the app loggers")
    LOG_PATH: str = Field("", description="Directory for rotating log files. Empty disables file logging.")

    # Rate lookup (USD base)
    FX_API_URL: str = Field("https://open.er-api.com/v6/latest/USD", description="USD-base rate table endpoint")
    FX_HTTP_TIMEOUT_S: float = 5.0

    USE_COLOR: bool = True

settings = Settings()
