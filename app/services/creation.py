import logging

from app.core.errors import IntegrityViolation, StoreError
from app.core.security import PasswordHasher
from app.db.store import EntityStore
from app.models import Product, User
from app.schemas.product import ProductCreate
from app.schemas.user import UserCreate
from app.services.validators import validate_new_product, validate_new_user

logger = logging.getLogger(__name__)


def create_user(store: EntityStore, payload: UserCreate, hasher: PasswordHasher) -> User:
    validate_new_user(store, payload)

    # hash before the plaintext can reach the session or a log line
    data = payload.model_dump()
    data["password"] = hasher.hash(payload.password)
    user = User(**data)

    try:
        store.insert(user)
    except IntegrityViolation:
        # lost a race against an identical request: report it like the fast path would
        validate_new_user(store, payload)
        raise StoreError("Failed to create user")

    logger.info("created user id=%s", user.id)
    return user


def create_product(store: EntityStore, payload: ProductCreate) -> Product:
    validate_new_product(store, payload)

    product = Product(**payload.model_dump())
    try:
        store.insert(product)
    except IntegrityViolation:
        validate_new_product(store, payload)
        raise StoreError("Failed to create product")

    logger.info("created product id=%s name=%r", product.id, product.name)
    return product
