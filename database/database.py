from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import get_config


@lru_cache()
def get_engine() -> Engine:
    """Create the engine on first use so importing never needs a DB driver."""
    return create_engine(get_config().database.url, pool_pre_ping=True)


@lru_cache()
def get_session_factory() -> sessionmaker:
    return sessionmaker(autoflush=False, bind=get_engine())


def SessionLocal():
    return get_session_factory()()
