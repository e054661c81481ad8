"""
Configuration module for the application.
All configuration values are read from environment variables.
"""
import os
import secrets
import warnings


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "")
    return int(value) if value else default


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Flask Configuration
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "")
        self.FLASK_ENV: str = os.getenv("FLASK_ENV", "")
        self.FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "").lower() == "true"

        # Generate a development SECRET_KEY if not set and in development mode
        if not self.SECRET_KEY and self.FLASK_ENV != "production":
            self.SECRET_KEY = secrets.token_urlsafe(32)
            warnings.warn(
                "SECRET_KEY not set. Generated a temporary key for development. "
                "Set SECRET_KEY in your .env file for production!",
                UserWarning
            )

        # Database Configuration
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "")
        self.DB_USER: str = os.getenv("DB_USER", "")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_HOST: str = os.getenv("DB_HOST", "")
        self.DB_PORT: str = os.getenv("DB_PORT", "")
        self.DB_NAME: str = os.getenv("DB_NAME", "")

        # SQLAlchemy Configuration
        self.SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
        sqlalchemy_echo = os.getenv("SQLALCHEMY_ECHO", "")
        self.SQLALCHEMY_ECHO: bool = sqlalchemy_echo.lower() == "true" if sqlalchemy_echo else False

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # File storage - attachments are resolved beneath this directory
        self.UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "uploads")

        # Quiz generation
        self.QUIZ_MIN_CONTEXT_LENGTH: int = _int_env("QUIZ_MIN_CONTEXT_LENGTH", 200)
        self.QUIZ_TARGET_QUESTION_COUNT: int = _int_env("QUIZ_TARGET_QUESTION_COUNT", 10)
        self.QUIZ_MIN_QUESTION_COUNT: int = _int_env("QUIZ_MIN_QUESTION_COUNT", 5)
        self.QUIZ_TOP_CONCEPT_LIMIT: int = _int_env("QUIZ_TOP_CONCEPT_LIMIT", 40)
        self.QUIZ_BIGRAM_MIN_COUNT: int = _int_env("QUIZ_BIGRAM_MIN_COUNT", 1)
        self.QUIZ_BIGRAM_WEIGHT: int = _int_env("QUIZ_BIGRAM_WEIGHT", 2)

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Use DATABASE_URL when given, otherwise build a MySQL URI from the DB_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"

    def validate(self) -> None:
        """
        Validate required configuration values.
        Only enforces SECRET_KEY in production environment.
        """
        if not self.SECRET_KEY and self.FLASK_ENV == "production":
            raise ValueError(
                "SECRET_KEY environment variable is required in production. "
                "Set it in your .env file or environment variables."
            )
        if self.QUIZ_MIN_QUESTION_COUNT > self.QUIZ_TARGET_QUESTION_COUNT:
            raise ValueError(
                "QUIZ_MIN_QUESTION_COUNT cannot be greater than QUIZ_TARGET_QUESTION_COUNT."
            )


# Global config instance - will be re-initialized after load_dotenv()
config = Config()
