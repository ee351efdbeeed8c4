from fastapi import APIRouter, Depends, status

from app.api.deps import get_store
from app.db.store import EntityStore
from app.schemas.product import ProductCreate, ProductCreated
from app.services.creation import create_product

router = APIRouter(prefix="/products", tags=["products"])


@router.post("/", response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
def add_product(product: ProductCreate, store: EntityStore = Depends(get_store)):
    db_product = create_product(store, product)
    return {"message": "Product created successfully", "product": db_product}
