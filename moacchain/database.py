"""
Настройка базы данных SQLAlchemy для записей о непросканированных блоках

Движок создается при первом обращении, а не при импорте.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from moacchain.config import settings

_engine: Optional[Engine] = None

# Фабрика сессий, движок привязывается в get_db()
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

# Базовый класс для моделей
Base = declarative_base()


def get_engine() -> Engine:
    """Создание движка базы данных по настройкам при первом вызове"""
    global _engine
    if _engine is None:
        _engine = create_engine(
            settings.DATABASE_URL,
            connect_args=(
                {"check_same_thread": False}
                if "sqlite" in settings.DATABASE_URL
                else {}
            ),
            echo=settings.DEBUG,
        )
        SessionLocal.configure(bind=_engine)
    return _engine


def init_db() -> None:
    """Создание таблиц, если их еще нет"""
    from moacchain import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def get_db():
    """
    Генератор для получения сессии базы данных
    """
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
