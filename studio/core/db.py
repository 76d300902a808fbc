from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Базовый класс для моделей
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Асинхронный движок для хранилища снимков"""
    return create_async_engine(database_url, future=True, echo=echo)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    """Фабрика сессий"""
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
