import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from app.api.deps import get_store
from app.db.store import EntityStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
async def default_response():
    return {"message": "Welcome to the E-Commerce API"}


@router.get("/db-check")
def db_check(store: EntityStore = Depends(get_store)):
    try:
        return {"status": "ok", "result": store.ping()}
    except SQLAlchemyError as e:
        logger.error("database check failed: %s", e)
        return {"status": "error", "detail": str(e)}
