from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from src.config import Settings, get_settings


def build_engine(settings: Settings | None = None) -> Engine:
    settings = settings or get_settings()
    # Синхронный движок SQLAlchemy
    return create_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
        pool_recycle=1800,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    """Фабрика сессий: одна сессия на весь прогон сканера."""
    return sessionmaker(engine, expire_on_commit=False)
