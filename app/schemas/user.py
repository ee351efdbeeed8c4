from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from app.schemas.audit import AuditOut

# surrounding blanks are dropped before the length check, so "   " is rejected
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=150)]
Email = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]


class UserCreate(BaseModel):
    username: Username
    email: Email
    password: str = Field(min_length=1)
    first_name: Optional[str] = Field(default=None, max_length=150)
    last_name: Optional[str] = Field(default=None, max_length=150)


class UserOut(AuditOut):
    username: str
    email: str
    password: str  # the stored bcrypt hash
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserCreated(BaseModel):
    message: str
    user: UserOut
