from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import LoadProfileUseCase, ProfileResponse
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/user", tags=["User"])


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Profile of the authenticated user

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(current_user["username"])

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
