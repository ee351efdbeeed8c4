from fastapi import APIRouter, Depends, status

from app.api.deps import get_hasher, get_store
from app.core.security import PasswordHasher
from app.db.store import EntityStore
from app.schemas.user import UserCreate, UserCreated
from app.services.creation import create_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def register(
    user: UserCreate,
    store: EntityStore = Depends(get_store),
    hasher: PasswordHasher = Depends(get_hasher),
):
    db_user = create_user(store, user, hasher)
    return {"message": "User created successfully", "user": db_user}
