from pydantic import BaseModel, ConfigDict

from quickcheck.db.models import UserRole


class LoginRequest(BaseModel):
    role: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    role: UserRole


class AuthResponse(BaseModel):
    accessToken: str
    user: UserOut
