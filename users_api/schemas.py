import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises as camelCase and accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(CamelModel):
    """Schema used for incoming create requests.

    Identifiers are generated server-side; an ``id`` key in the payload
    is ignored.
    """

    full_name: str


class UserResponse(CamelModel):
    id: uuid.UUID
    full_name: str
