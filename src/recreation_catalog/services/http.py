"""
Shared HTTP session factory with a default timeout.

Provides a pre-configured ``requests.Session`` with a ``urllib3`` retry
adapter mounted and a timeout injected into every request, so a hung
catalog call can never block the caller indefinitely.  Catalog failures
are meant to reach the caller, so the default strategy performs no retries;
pass a custom ``Retry`` to opt in.

Usage::

    from recreation_catalog.services.http import create_session

    s = create_session(timeout=10)
    resp = s.get("https://ridb.recreation.gov/api/v1/facilities/232831")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from recreation_catalog import __version__

#: Default retry strategy: none. Errors surface on the first failure.
DEFAULT_RETRY = Retry(
    total=0,
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds


def build_retry(max_retries: int) -> Retry:
    """Retry strategy for ``max_retries`` attempts on transient statuses."""
    if max_retries <= 0:
        return DEFAULT_RETRY
    return Retry(
        total=max_retries,
        backoff_factor=2,
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,
    )


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = f"recreation-catalog/{__version__}"

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
