from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Tokens are only accepted when both tags match
    JWT_ISSUER: str = "rems-api"
    JWT_AUDIENCE: str = "rems-client"

    DATABASE_URL: str
    ENVIRONMENT: str = "development"  # "development", "production" or "test"

    # Firm selector names; the pair is configuration, not protocol
    FIRM_HEADER_NAME: str = "X-Firm-Id"
    FIRM_QUERY_PARAM: str = "firm_id"

    BCRYPT_ROUNDS: int = 12
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @property
    def access_token_expire_seconds(self):
        return self.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
