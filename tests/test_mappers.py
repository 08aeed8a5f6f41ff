import uuid

from users_api.mappers import to_user_response, to_user_responses
from users_api.models import User


def test_to_user_response_copies_every_field():
    user = User(id=uuid.uuid4(), full_name="Nick Chapsas")

    response = to_user_response(user)

    assert response.id == user.id
    assert response.full_name == user.full_name
    assert set(response.model_dump()) == {"id", "full_name"}


def test_to_user_response_keeps_name_verbatim():
    name = "  ÉLODIE o'Brien-Smith  "
    user = User(id=uuid.uuid4(), full_name=name)

    assert to_user_response(user).full_name == name


def test_to_user_response_serialises_camel_case():
    user = User(id=uuid.UUID("1f0e4c52-8d9a-4c1b-9a55-3f3c2d7a1e01"), full_name="Nick Chapsas")

    payload = to_user_response(user).model_dump(mode="json", by_alias=True)

    assert payload == {"id": "1f0e4c52-8d9a-4c1b-9a55-3f3c2d7a1e01", "fullName": "Nick Chapsas"}


def test_to_user_responses_maps_pointwise_in_order():
    users = [User(id=uuid.uuid4(), full_name=name) for name in ("b", "a", "c")]

    responses = to_user_responses(users)

    assert [r.full_name for r in responses] == ["b", "a", "c"]
    assert responses == [to_user_response(u) for u in users]


def test_to_user_responses_of_nothing_is_an_empty_list():
    assert to_user_responses([]) == []
    assert to_user_responses(iter(())) == []
