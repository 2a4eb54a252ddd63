"""
Standardized API response utilities.

Helpers for turning repository results and errors into the JSON bodies
returned by applications built on the package.
"""

from typing import Any, Dict, Iterable, Optional

from sqlalchemy.engine import Row


def row_to_dict(row: Row) -> Dict[str, Any]:
    """Convert a result row into a plain dict keyed by column name."""
    return dict(row._mapping)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Dict with standardized success response format
    """
    response = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def paginated_response(
    rows: Iterable[Row],
    total: int,
    page: int,
    per_page: int,
) -> Dict[str, Any]:
    """
    Create a success response for the ``(rows, total)`` pair returned by
    ``Repository.get_with_total``.
    """
    response = success_response([row_to_dict(row) for row in rows])
    response["meta"] = {
        "total": total,
        "page": page,
        "per_page": per_page,
        "pages": (total + per_page - 1) // per_page if per_page > 0 else 0,
    }
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Optional error code
        details: Optional additional error details

    Returns:
        Dict with standardized error response format
    """
    error = {"message": message}

    if code:
        error["code"] = code

    if details:
        error["details"] = details

    return {
        "success": False,
        "error": error
    }
