from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import AfterValidator, BaseModel, Field
from pydantic.networks import validate_email

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.access_token_issuer import IAccessTokenIssuer
from src.app.services.mailer import IMailer
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    SignupCommand,
    SignupResponse,
    SignupUseCase,
    LoginUseCase,
    IssuePasswordResetTokenUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    ConfirmPasswordResetCommand,
    LoginResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import (
    get_access_token_issuer,
    get_mailer,
    get_password_hasher,
    get_unit_of_work,
)

router = APIRouter(prefix="/user", tags=["Authentication"])


def check_email_format(value: str) -> str:
    """
    Reject malformed addresses but keep the submitted text as is.

    EmailStr would lowercase the domain; stored and looked-up emails are
    compared exactly.
    """
    validate_email(value)
    return value


SubmittedEmail = Annotated[str, AfterValidator(check_email_format)]


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    Password confirmation is compared by the use case.
    """

    username: str = Field(..., min_length=3, max_length=25, description="Username")
    email: SubmittedEmail = Field(..., description="User email address")
    password1: str = Field(..., min_length=1, description="Password")
    password2: str = Field(..., min_length=1, description="Password confirmation")


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    User Signup

    Creates a new account with a hashed password.

    Raises:
        - 400 Bad Request: Password confirmation does not match
        - 409 Conflict: Username or email already registered
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        username=request.username,
        email=request.email,
        password1=request.password1,
        password2=request.password2,
    )

    use_case = SignupUseCase(uow, password_hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_issuer: IAccessTokenIssuer = Depends(get_access_token_issuer),
):
    """
    User Login

    Checks credentials and returns a bearer access token.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, password_hasher, token_issuer)
    result = await use_case.execute(request.username, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class RequestPasswordResetRequest(BaseModel):
    """Request password reset HTTP request payload"""

    email: SubmittedEmail = Field(..., description="User email address")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Request Password Reset

    Issues a single-use reset token and emails the reset link.

    Raises:
        - 404 Not Found: Email not registered (unless PASSWORD_RESET_HIDE_UNKNOWN_EMAIL)
        - 502 Bad Gateway: Reset email could not be sent
        - 500 Internal Server Error: Server error
    """
    issue_token = IssuePasswordResetTokenUseCase(
        uow,
        token_ttl=timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TOKEN_TTL_MINUTES),
    )
    use_case = RequestPasswordResetUseCase(
        issue_token,
        mailer,
        reset_link_base=ApplicationConfig.PASSWORD_RESET_LINK_BASE,
        hide_unknown_email=ApplicationConfig.PASSWORD_RESET_HIDE_UNKNOWN_EMAIL,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "EMAIL_DELIVERY_FAILED":
            raise ClientError(error, status_code=status.HTTP_502_BAD_GATEWAY)
        raise ServerError(error)

    return result.value


class ConfirmPasswordResetRequest(BaseModel):
    """Confirm password reset HTTP request payload"""

    token: str = Field(..., min_length=1, description="Password reset token from email")
    password1: str = Field(..., min_length=1, description="New password")
    password2: str = Field(..., min_length=1, description="New password confirmation")


@router.post(
    "/reset-password/confirm",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Confirm Password Reset

    Redeems the reset token and sets the new password. A token works once.

    Raises:
        - 400 Bad Request: Password validation failed or invalid token
        - 410 Gone: Expired token
        - 500 Internal Server Error: Server error
    """
    command = ConfirmPasswordResetCommand(
        token=request.token,
        password1=request.password1,
        password2=request.password2,
    )

    use_case = ConfirmPasswordResetUseCase(
        uow,
        password_hasher,
        password_min_length=ApplicationConfig.PASSWORD_MIN_LENGTH,
    )
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "INVALID_TOKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "TOKEN_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value
