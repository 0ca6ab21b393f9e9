from dotenv import load_dotenv
import os

load_dotenv()


def _engine_options(uri):
    # Pool and SSL settings only make sense for a managed PostgreSQL instance
    if not uri or not uri.startswith("postgresql"):
        return {}
    return {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_size': 5,
        'max_overflow': 10,
        'pool_timeout': 30,
        'connect_args': {
            'sslmode': os.getenv("DATABASE_SSLMODE", "require"),
            'connect_timeout': 10,
        }
    }


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///fittrack.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key-for-hs256-signing-0123456789"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = "WARNING"
