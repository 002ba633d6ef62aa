"""Response utilities."""
from fastapi import status
from fastapi.responses import PlainTextResponse, Response

EMPTY_JSON_OBJECT = "{}"


def json_text_response(content: str) -> Response:
    """Return already-serialised JSON text as-is with a JSON content type."""
    return Response(
        content=content or EMPTY_JSON_OBJECT,
        status_code=status.HTTP_200_OK,
        media_type="application/json",
    )


def error_text_response(
    message: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> PlainTextResponse:
    """Return a plain-text error body."""
    return PlainTextResponse(content=message, status_code=status_code)


def method_not_allowed() -> PlainTextResponse:
    """Return the 405 response for anything but POST."""
    return error_text_response(
        "Method Not Allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
    )
