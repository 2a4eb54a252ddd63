"""
Unit tests for response helpers.
"""

from sql_repository.utils.api_response import error_response, paginated_response, success_response


def test_success_response():
    assert success_response() == {"success": True}
    assert success_response([1], message="ok") == {"success": True, "data": [1], "message": "ok"}


def test_error_response():
    assert error_response("Nope") == {"success": False, "error": {"message": "Nope"}}
    assert error_response("Nope", code="x", details={"a": 1})["error"] == {
        "message": "Nope",
        "code": "x",
        "details": {"a": 1},
    }


def test_paginated_response_meta(user_repository):
    rows, total = user_repository.order_by("id").for_page(1, 2).get_with_total()

    response = paginated_response(rows, total, 1, 2)

    assert [row["name"] for row in response["data"]] == ["Ada", "Grace"]
    assert response["meta"] == {"total": 5, "page": 1, "per_page": 2, "pages": 3}


def test_paginated_response_without_page_size():
    assert paginated_response([], 0, 1, 0)["meta"]["pages"] == 0
