"""HTTP retrieval of remote specifications."""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ts_oas_generator.constants import DEFAULT_FETCH_TIMEOUT, FETCH_RETRY_STATUSES
from ts_oas_generator.errors import SpecFetchError

logger = logging.getLogger(__name__)


def create_session() -> requests.Session:
    """Create a session that retries transient server errors."""
    session = requests.Session()
    retries = Retry(total=3, backoff_factor=0.5, status_forcelist=FETCH_RETRY_STATUSES)
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def fetch_spec(
    url: str,
    *,
    auth_user: str | None = None,
    auth_password: str | None = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    session: requests.Session | None = None,
) -> bytes:
    """Fetch a JSON/YAML specification with HTTP GET.

    Basic authentication is sent only when ``auth_user`` is given; a missing
    password is sent as an empty string.

    Raises:
        SpecFetchError: On transport errors or any status other than 200.
    """
    session = session or create_session()
    auth = (auth_user, auth_password or "") if auth_user is not None else None

    logger.debug("Fetching specification from %s", url)
    try:
        response = session.get(url, auth=auth, timeout=timeout)
    except requests.RequestException as e:
        raise SpecFetchError(url, str(e)) from e

    if response.status_code != requests.codes.ok:
        raise SpecFetchError(url, f"HTTP {response.status_code} {response.reason}", response.status_code)
    return response.content
