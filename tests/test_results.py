import json

from minitwit.core.errors import AuthError, NotFoundError, StateError
from minitwit.core.results import Error, Success, to_response


def test_success_without_data_is_no_content():
    response = to_response(Success())
    assert response.status_code == 204
    assert response.body == b""


def test_success_with_data_is_json():
    response = to_response(Success.ok({"latest": 3}))
    assert response.status_code == 200
    assert json.loads(response.body) == {"latest": 3}


def test_empty_list_is_still_a_body():
    response = to_response(Success.ok([]))
    assert response.status_code == 200
    assert json.loads(response.body) == []


def test_error_body_mirrors_status():
    response = to_response(Error.from_exception(AuthError("Username does not match a user")))
    assert response.status_code == 401
    assert json.loads(response.body) == {
        "error_msg": "Username does not match a user",
        "status_code": 401,
    }


def test_error_status_defaults():
    assert Error.from_exception(NotFoundError("x")).status_code == 400
    assert Error.from_exception(StateError("x")).status_code == 400
    assert Error.from_exception(StateError("x", status_code=409)).status_code == 409
