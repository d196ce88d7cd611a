# nexusblog/routes/user.py

"""User routes for signup and signin."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from nexusblog.dependencies import AuthServiceDep
from nexusblog.managers import limiter
from nexusblog.schemas import SigninInput, SignupInput, Token

router = APIRouter(prefix="/api/v1/user", tags=["🔐 User"])


@router.post(
    "/signup",
    response_class=ORJSONResponse,
    response_model=Token,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account and return a signed JWT for it.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {"jwt": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."},
                },
            },
        },
        409: {
            "description": "Email already registered",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Email 'aditya@example.com' already exists",
                        "success": False,
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="user_signup",
)
@limiter.limit("3/minute")
async def signup(
    request: Request,
    response: Response,
    payload: SignupInput,
    auth_service: AuthServiceDep,
) -> Token:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter.
    payload : SignupInput
        Email, password and optional name.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Token
        Signed JWT.

    Raises
    ------
    DuplicateEntryError
        If the email is already registered.
    """
    return await auth_service.signup(payload)


@router.post(
    "/signin",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Sign in",
    description="Exchange email and password for a signed JWT.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"jwt": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."},
                },
            },
        },
        403: {
            "description": "Wrong email or password",
            "content": {
                "application/json": {
                    "example": {"detail": "Invalid credentials", "success": False},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="user_signin",
)
@limiter.limit("5/minute")
async def signin(
    request: Request,
    response: Response,
    payload: SigninInput,
    auth_service: AuthServiceDep,
) -> Token:
    """
    Sign in with email and password.

    Raises
    ------
    InvalidCredentialsError
        If the email is unknown or the password does not match.
    """
    return await auth_service.signin(payload)
