"""Database session management."""

import logging
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bondpos.core.config import settings
from bondpos.db.base import Base
from bondpos.db.seed import load_demo_data
from bondpos.db.store import Store, database_lock

logger = logging.getLogger(__name__)

# Create engine - handle SQLite specially for check_same_thread
connect_args = {}
pool_config = {}

if settings.database_url.startswith("sqlite"):
    connect_args = {"check_same_thread": False}
    if ":memory:" in settings.database_url:
        # Every session must see the same in-memory database
        pool_config = {"poolclass": StaticPool}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=settings.database_echo,
    **pool_config,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db() -> None:
    """Create the schema and load the demo data into an empty database."""
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        store = Store(db, order_number_start=settings.order_number_start)
        if settings.seed_demo_data and len(store.orders) == 0 and len(store.products) == 0:
            load_demo_data(store)
        logger.info(
            f"Database ready (demo data: {settings.seed_demo_data}, "
            f"next order number: {store.order_numbers.peek()})"
        )


def get_db() -> Generator[Session, None, None]:
    """Get database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        with database_lock:
            db.close()


# Type aliases for dependency injection
DbSession = Annotated[Session, Depends(get_db)]


def get_store(db: DbSession) -> Store:
    """Get the entity store for the request's session."""
    return Store(db, order_number_start=settings.order_number_start)


StoreDep = Annotated[Store, Depends(get_store)]
