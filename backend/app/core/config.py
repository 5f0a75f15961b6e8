"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── MongoDB ───────────────────────────────
    MONGO_USERNAME: str = ""
    MONGO_PASSWORD: str = ""
    MONGO_HOST: str = "cluster0.ybs8l.mongodb.net"
    MONGO_APP_NAME: str = "Cluster0"
    MONGO_DB: str = "coursesDB"
    MONGO_URI: str = ""

    @property
    def MONGO_URL(self) -> str:
        """Connection string; an explicit MONGO_URI replaces the composed SRV URL."""
        if self.MONGO_URI:
            return self.MONGO_URI
        return (
            f"mongodb+srv://{self.MONGO_USERNAME}:{self.MONGO_PASSWORD}@{self.MONGO_HOST}/"
            f"?retryWrites=true&w=majority&appName={self.MONGO_APP_NAME}"
        )

    # ── Auth / JWT ────────────────────────────
    JWT_SECRET_KEY: str = "change-this-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
