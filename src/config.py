from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Measure Calculator"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Engine
    MAX_EXPRESSION_LENGTH: int = 256
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    
    # Rate limiting (sliding window per client address)
    RATE_LIMIT_WINDOW_SECONDS: float = 60.0
    RATE_LIMIT_MAX_REQUESTS: int = 30
    RATE_LIMIT_MAX_KEYS: int = 10000
    # Honor X-Forwarded-For only when every request arrives through a proxy that sets it
    TRUST_FORWARDED_FOR: bool = True
    
    # CORS
    CORS_ALLOWED_ORIGINS: str = (
        "https://calculator.onsiteclub.ca,"
        "https://app.onsiteclub.ca,"
        "https://localhost,"
        "http://localhost:5173,"
        "http://localhost:3000"
    )
    CORS_ALLOWED_ORIGIN_REGEX: str = r"^(capacitor|ionic)://.*$"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]

@lru_cache()
def get_settings() -> Settings:
    return Settings()
