from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from app.schemas.audit import AuditOut

# products.stock is a 32-bit INTEGER column
MAX_STOCK = 2_147_483_647

ProductName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class ProductCreate(BaseModel):
    name: ProductName
    description: Optional[str] = None
    price: float = Field(ge=0, allow_inf_nan=False)
    stock: int = Field(ge=0, le=MAX_STOCK)


class ProductOut(AuditOut):
    name: str
    description: Optional[str] = None
    price: float
    stock: int


class ProductCreated(BaseModel):
    message: str
    product: ProductOut
