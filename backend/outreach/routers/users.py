from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from outreach.database import get_db
from outreach.dependencies import get_current_user
from outreach.models.user import User
from outreach.schemas.base import DeleteResponse
from outreach.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserListResponse,
    UserMutationResponse,
    UserResponse,
)
from outreach.services import user_service
from outreach.utils.security import create_access_token

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/login", response_model=LoginResponse)
async def login(req: LoginRequest, db: Session = Depends(get_db)):
    user = user_service.authenticate(db, req.username, req.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = create_access_token(user.id, user.username, user.role)
    return LoginResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserMutationResponse)
async def me(user: User = Depends(get_current_user)):
    return UserMutationResponse(user=UserResponse.model_validate(user))


@router.get("", response_model=UserListResponse)
async def list_users(db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.created_at).all()
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])


@router.post("", response_model=UserMutationResponse)
async def create_user(req: UserCreate, db: Session = Depends(get_db)):
    if not req.username or not req.password or not req.role:
        raise HTTPException(status_code=400, detail="Missing fields")
    try:
        user = user_service.create_user(db, req.username, req.password, req.role)
    except user_service.DuplicateUsernameError:
        raise HTTPException(status_code=400, detail="Username already exists")
    return UserMutationResponse(user=UserResponse.model_validate(user))


@router.delete("/{user_id}", response_model=DeleteResponse)
async def delete_user(user_id: str, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    return DeleteResponse(id=user_id)
