from outreach.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str | None = None
    password: str | None = None
    role: str | None = None


class UserResponse(CamelModel):
    id: str
    username: str
    role: str
    created_at: int


class UserMutationResponse(CamelModel):
    success: bool = True
    user: UserResponse


class UserListResponse(CamelModel):
    users: list[UserResponse]


class LoginRequest(CamelModel):
    username: str = ""
    password: str = ""


class LoginResponse(CamelModel):
    success: bool = True
    user: UserResponse
    token: str
