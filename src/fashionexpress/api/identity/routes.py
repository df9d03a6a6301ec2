"""FastAPI endpoints for accounts, login sessions and profiles."""

from fastapi import APIRouter, Depends, Request, Response
from protean.utils.globals import current_domain

from fashionexpress.api.identity.dependencies import current_user_id, session_token
from fashionexpress.api.identity.schemas import (
    LoginRequest,
    RegisterRequest,
    StatusResponse,
    UpdateProfileRequest,
    UserResponse,
)
from fashionexpress.session.auth import authenticate, close_session, current_user, open_session
from fashionexpress.shared.commands import dispatch
from fashionexpress.user.registration import RegisterUser, UpdateProfile
from fashionexpress.user.user import User
from fashionexpress.utils.config import setting

auth_router = APIRouter(prefix="/auth", tags=["auth"])
user_router = APIRouter(prefix="/users", tags=["users"])


def user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        username=user.username,
        email=user.email,
        name=user.name,
        phone=user.phone,
        address=user.address,
        city=user.city,
        state=user.state,
        pincode=user.pincode,
    )


def _start_session(response: Response, user_id) -> None:
    session = open_session(user_id)
    response.set_cookie(
        key=setting("SESSION_COOKIE"),
        value=session.token,
        max_age=int(setting("SESSION_TTL_HOURS")) * 3600,
        httponly=True,
        samesite="lax",
    )


# ---------------------------------------------------------------------------
# Registration and profile
# ---------------------------------------------------------------------------
@user_router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: RegisterRequest, response: Response) -> UserResponse:
    """Create an account and log the new user in."""
    command = RegisterUser(**body.model_dump())
    user_id = dispatch(command)
    _start_session(response, user_id)
    return user_response(current_domain.repository_for(User).get(user_id))


@user_router.get("/profile", response_model=UserResponse)
async def get_profile(user_id: str = Depends(current_user_id)) -> UserResponse:
    return user_response(current_domain.repository_for(User).get(user_id))


@user_router.put("/profile", response_model=UserResponse)
async def update_profile(body: UpdateProfileRequest, user_id: str = Depends(current_user_id)) -> UserResponse:
    command = UpdateProfile(user_id=user_id, **body.model_dump(exclude_none=True))
    dispatch(command)
    return user_response(current_domain.repository_for(User).get(user_id))


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------
@auth_router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, response: Response) -> UserResponse:
    user = authenticate(body.username, body.password)
    _start_session(response, user.id)
    return user_response(user)


@auth_router.post("/logout", response_model=StatusResponse)
async def logout(request: Request, response: Response) -> StatusResponse:
    close_session(session_token(request))
    response.delete_cookie(setting("SESSION_COOKIE"))
    return StatusResponse()


@auth_router.get("/user", response_model=UserResponse)
async def who_am_i(request: Request) -> UserResponse:
    return user_response(current_user(session_token(request)))
