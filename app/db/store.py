import logging
from typing import Any, Optional, Type, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app import models  # noqa: F401  registers every table on Base.metadata
from app.core.errors import IntegrityViolation, StoreError
from app.db.session import Base, create_db_engine, create_session_factory

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class EntityStore:
    """Persistence gateway over the relational backend.

    Every public call opens its own session and performs a single round trip,
    so one store instance can be shared by all requests.
    """

    def __init__(self, engine: Engine, session_factory: Optional[sessionmaker] = None):
        self.engine = engine
        self.session_factory = session_factory or create_session_factory(engine)

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> Any:
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar()

    def find_by_field(self, model: Type[T], field: str, value: Any) -> Optional[T]:
        """Return the live row whose ``field`` equals ``value``, or None."""
        column = getattr(model, field, None)
        if column is None:
            raise ValueError(f"{model.__name__} has no field {field!r}")
        try:
            with self.session_factory() as db:
                return (
                    db.query(model)
                    .filter(column == value, model.deleted_at.is_(None))
                    .first()
                )
        except SQLAlchemyError as e:
            logger.error("lookup of %s by %s failed", model.__name__, field, exc_info=True)
            raise StoreError(f"Failed to look up {model.__name__.lower()}") from e

    def insert(self, entity: T) -> T:
        """Persist ``entity`` and return it with its generated id and timestamps."""
        name = type(entity).__name__.lower()
        with self.session_factory() as db:
            try:
                db.add(entity)
                db.commit()
                db.refresh(entity)
            except IntegrityError as e:
                db.rollback()
                logger.info("insert of %s rejected by a constraint: %s", name, e.orig)
                raise IntegrityViolation(f"Failed to create {name}") from e
            except (SQLAlchemyError, OverflowError) as e:
                db.rollback()
                logger.error("insert of %s failed", name, exc_info=True)
                raise StoreError(f"Failed to create {name}") from e
            db.expunge(entity)
        return entity

    def dispose(self) -> None:
        self.engine.dispose()


def init_store(database_url: str, echo: bool = False) -> EntityStore:
    """Connect to the database and create the schema. The only initialisation path."""
    store = EntityStore(create_db_engine(database_url, echo=echo))
    store.create_schema()
    logger.info("Database connected and migrated successfully (%s)", store.engine.url.render_as_string())
    return store
