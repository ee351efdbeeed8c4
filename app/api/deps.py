from fastapi import Request

from app.core.security import PasswordHasher
from app.db.store import EntityStore


# Dependencies: both objects are built once in create_app and live on app.state

def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher
