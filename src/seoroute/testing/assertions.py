"""Response assertion helpers for seoroute tests.

Each assertion produces a clear error message on failure.
"""

import json as json_module
from typing import Any
from urllib.parse import unquote

from seoroute.http.response import Response


def assert_redirects_to(response: Response, url: str, *, status: int | None = None) -> None:
    """Assert the response redirects to *url*.

    The ``Location`` header is compared after percent-decoding, so
    ``/Product/B%C3%BCz/`` matches ``/Product/Büz/``.
    """
    assert response.is_redirect, (
        f"Expected a redirect, got {response.status} without Location.\n"
        f"Response body: {response.text[:500]}"
    )
    location = unquote(response.location or "")
    assert location == url, f"Expected Location {url!r}, got {location!r}"
    if status is not None:
        assert response.status == status, f"Expected status {status}, got {response.status}"


def assert_serves(response: Response, expected: Any, *, status: int = 200) -> None:
    """Assert the response is a non-redirect whose JSON body equals *expected*."""
    assert response.status == status, (
        f"Expected status {status}, got {response.status}.\n"
        f"Response body: {response.text[:500]}"
    )
    assert not response.is_redirect, f"Unexpected redirect to {response.location!r}"
    try:
        data = json_module.loads(response.text)
    except json_module.JSONDecodeError as exc:
        msg = f"Response body is not valid JSON: {response.text[:500]}"
        raise AssertionError(msg) from exc
    assert data == expected, f"Expected {expected!r}, got {data!r}"


def assert_not_found(response: Response) -> None:
    """Assert the response is a 404."""
    assert response.status == 404, (
        f"Expected status 404, got {response.status}.\n"
        f"Response body: {response.text[:500]}"
    )
