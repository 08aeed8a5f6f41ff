import uuid
from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from .. import schemas
from ..controllers import GET_USER_ROUTE, ActionResult, UserController
from ..dependencies import get_user_controller

router = APIRouter(prefix="/users", tags=["users"])


def render(result: ActionResult, request: Request) -> Response:
    """Turn a controller result into a Starlette response.

    No value means an empty body. A route name becomes the ``Location``
    header.
    """
    if result.value is None:
        response = Response(status_code=result.status_code)
    else:
        response = JSONResponse(
            jsonable_encoder(result.value, by_alias=True),
            status_code=result.status_code,
        )

    if result.route_name:
        params = {key: str(value) for key, value in result.route_values.items()}
        response.headers["Location"] = str(request.url_for(result.route_name, **params))
    return response


@router.get(
    "/{user_id}",
    name=GET_USER_ROUTE,
    response_model=schemas.UserResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def get_user(
    user_id: uuid.UUID,
    request: Request,
    controller: UserController = Depends(get_user_controller),
):
    return render(await controller.get_by_id(user_id), request)


@router.get("", response_model=List[schemas.UserResponse])
async def list_users(
    request: Request,
    controller: UserController = Depends(get_user_controller),
):
    return render(await controller.get_all(), request)


@router.post(
    "",
    response_model=schemas.UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "User was not created"}},
)
async def create_user(
    user_in: schemas.CreateUserRequest,
    request: Request,
    controller: UserController = Depends(get_user_controller),
):
    return render(await controller.create(user_in), request)


@router.delete(
    "/{user_id}",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def delete_user(
    user_id: uuid.UUID,
    request: Request,
    controller: UserController = Depends(get_user_controller),
):
    return render(await controller.delete_by_id(user_id), request)
