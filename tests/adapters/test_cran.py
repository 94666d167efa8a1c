from __future__ import annotations

from urllib.error import HTTPError, URLError

import pytest

from pkgmkr.adapters.cran import CranNameAvailability
from pkgmkr.errors import AdapterError


class _Response:
    def __enter__(self) -> "_Response":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


def _raising(error: BaseException):
    def urlopen(request, timeout):
        raise error

    return urlopen


def test_existing_package_is_taken():
    requested: list[str] = []

    def urlopen(request, timeout):
        requested.append(request.full_url)
        return _Response()

    client = CranNameAvailability(api_base_url="https://cran.test/", urlopen_fn=urlopen)

    assert client.check("dplyr") is False
    assert requested == ["https://cran.test/dplyr"]


def test_unknown_package_is_available():
    error = HTTPError("https://cran.test/newpkg", 404, "Not Found", hdrs=None, fp=None)
    client = CranNameAvailability(urlopen_fn=_raising(error))

    assert client.check("newpkg") is True


def test_server_errors_raise():
    error = HTTPError("https://cran.test/newpkg", 503, "Unavailable", hdrs=None, fp=None)
    client = CranNameAvailability(urlopen_fn=_raising(error))

    with pytest.raises(AdapterError, match="HTTP 503"):
        client.check("newpkg")


def test_network_errors_raise():
    client = CranNameAvailability(urlopen_fn=_raising(URLError("no route to host")))

    with pytest.raises(AdapterError, match="no route to host"):
        client.check("newpkg")
