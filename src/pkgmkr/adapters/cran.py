"""Advisory package name lookup against the CRAN package database."""

from __future__ import annotations

from typing import Any, Callable
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..errors import AdapterError
from ..interfaces import NameAvailability

__all__ = ["CranNameAvailability"]


class CranNameAvailability(NameAvailability):
    """A name is available when the CRAN database has no record for it."""

    def __init__(
        self,
        *,
        api_base_url: str = "https://crandb.r-pkg.org",
        timeout_seconds: float = 10.0,
        urlopen_fn: Callable[..., Any] = urlopen,
    ) -> None:
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._urlopen_fn = urlopen_fn

    def check(self, name: str) -> bool:
        url = f"{self._api_base_url}/{quote(name, safe='')}"
        request = Request(url, headers={"Accept": "application/json"})
        try:
            with self._urlopen_fn(request, timeout=self._timeout_seconds):
                return False
        except HTTPError as error:
            if error.code == 404:
                return True
            raise AdapterError(f"CRAN lookup failed with HTTP {error.code} for URL: {url}") from error
        except URLError as error:
            raise AdapterError(f"CRAN lookup failed for URL: {url}: {error.reason}") from error
