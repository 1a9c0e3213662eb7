from fastapi import APIRouter, Depends

from quickcheck.api.deps import get_current_user, get_store
from quickcheck.db.models import User
from quickcheck.db.store import Store
from quickcheck.schemas.auth import AuthResponse, LoginRequest, UserOut
from quickcheck.services.auth_service import login_as_role

router = APIRouter()


@router.post("/login")
def login(payload: LoginRequest, store: Store = Depends(get_store)):
    user, token = login_as_role(store, payload.role)
    return {"data": AuthResponse(accessToken=token, user=UserOut.model_validate(user))}


@router.get("/me")
def me(user: User = Depends(get_current_user)):
    return {"data": UserOut.model_validate(user)}
