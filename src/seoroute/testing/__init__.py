"""Test utilities for seoroute applications.

Provides an in-process ASGI test client and assertion helpers::

    from seoroute.testing import TestClient, assert_redirects_to
"""

from seoroute.testing.assertions import assert_not_found, assert_redirects_to, assert_serves
from seoroute.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_not_found",
    "assert_redirects_to",
    "assert_serves",
]
