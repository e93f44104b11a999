from pathlib import Path
from typing import Annotated, List, Optional

import orjson
from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Movie Booking Platform'
    VERSION: str = '1.0.0'
    DEBUG: bool = True  # Set to False in production
    TIMEZONE: str = 'UTC'  # Booking window "today" is evaluated in this zone

    # CORS (comma-separated or a JSON list)
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return orjson.loads(v)
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        if isinstance(v, list):
            return v
        return []

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'movie_booking'
    DATABASE_URL: Optional[str] = None  # Full override, e.g. sqlite+aiosqlite:///./local.db

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True
    AUTO_CREATE_TABLES: bool = True

    # Service addresses (static registry, resolved by configuration)
    GATEWAY_BASE_URL: str = 'http://localhost:9090'
    USER_SERVICE_URL: str = 'http://localhost:8081'
    MOVIE_SERVICE_URL: str = 'http://localhost:8082'
    SHOWTIME_SERVICE_URL: str = 'http://localhost:8083'
    BOOKING_SERVICE_URL: str = 'http://localhost:8084'

    SHOWTIME_CLIENT_TIMEOUT: float = 10.0  # seconds

    @property
    def SERVICE_ENDPOINTS(self) -> dict[str, str]:
        return {
            'User Service': f'{self.USER_SERVICE_URL}/api/users',
            'Movie Service': f'{self.MOVIE_SERVICE_URL}/api/movies',
            'Movie Admin': f'{self.MOVIE_SERVICE_URL}/api/admin/movies',
            'Cinema Admin': f'{self.MOVIE_SERVICE_URL}/api/admin/cinemas',
            'Showtime Service': f'{self.SHOWTIME_SERVICE_URL}/api/showtimes',
            'Booking Service': f'{self.BOOKING_SERVICE_URL}/api/bookings',
        }


settings = Settings()  # type: ignore
