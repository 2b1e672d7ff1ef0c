from pydantic_settings import BaseSettings
import os

class ViewportSettings(BaseSettings):
    # Used whenever neither the caller nor the client hints supply a viewing context
    DEFAULT_WIDTH: float = float(os.getenv("VIEWPORT_DEFAULT_WIDTH", 1280))
    DEFAULT_HEIGHT: float = float(os.getenv("VIEWPORT_DEFAULT_HEIGHT", 800))
    DEFAULT_PIXEL_RATIO: float = float(os.getenv("VIEWPORT_DEFAULT_PIXEL_RATIO", 1.0))

class DebounceSettings(BaseSettings):
    DELAY_MS: int = int(os.getenv("DEBOUNCE_DELAY_MS", 200))

class ServerSettings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

class LoggingSettings(BaseSettings):
    LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    FORMAT: str = "%(asctime)s %(levelname)s %(name)s %(message)s"

class AppSettings(BaseSettings):
    VIEWPORT: ViewportSettings = ViewportSettings()
    DEBOUNCE: DebounceSettings = DebounceSettings()
    SERVER: ServerSettings = ServerSettings()
    LOGGING: LoggingSettings = LoggingSettings()

    VERSION: str = "1.0.0"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = AppSettings()
