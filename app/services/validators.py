"""Pre-insert uniqueness checks.

These only give callers a friendly rejection; the partial unique indexes on the
tables are what actually guarantee uniqueness under concurrent requests.
"""
import logging

from app.core.errors import ConflictError
from app.db.store import EntityStore
from app.models import Product, User
from app.schemas.product import ProductCreate
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def _reject(message: str) -> None:
    logger.info("rejected create: %s", message)
    raise ConflictError(message)


def validate_new_user(store: EntityStore, candidate: UserCreate) -> None:
    if store.find_by_field(User, "email", candidate.email) is not None:
        _reject("Email already in use")
    if store.find_by_field(User, "username", candidate.username) is not None:
        _reject("Username already in use")


def validate_new_product(store: EntityStore, candidate: ProductCreate) -> None:
    if store.find_by_field(Product, "name", candidate.name) is not None:
        _reject("Product name already in use")
