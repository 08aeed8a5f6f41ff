from typing import Iterable, List

from .models import User
from .schemas import UserResponse


def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, full_name=user.full_name)


def to_user_responses(users: Iterable[User]) -> List[UserResponse]:
    return [to_user_response(user) for user in users]
