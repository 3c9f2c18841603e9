import os
from dotenv import load_dotenv

from order_intake.domain.exceptions import ConfigurationError

load_dotenv()


class Settings:
    # Database
    DATABASE_URL_RAW: str = os.getenv("DATABASE_URL", "")
    STORE_TIMEOUT: float = float(os.getenv("STORE_TIMEOUT") or "5")

    # HTTP
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT") or "8080")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def LOGGING_LEVEL(self) -> str:
        """Имя уровня для logging, регистр в окружении не важен"""
        return self.LOG_LEVEL.strip().upper()

    @property
    def DATABASE_URL(self) -> str:
        """Асинхронный URL для приложения"""
        url = self.DATABASE_URL_RAW
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    def validate(self) -> None:
        if not self.DATABASE_URL_RAW:
            raise ConfigurationError("DATABASE_URL not set in environment")


settings = Settings()
