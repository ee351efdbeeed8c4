from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AuditOut(BaseModel):
    id: int
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
