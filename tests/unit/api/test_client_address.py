from starlette.requests import Request

from src.api.utils.client_address import client_address


def _request(headers=None, client=("203.0.113.7", 5000)):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)


def test_uses_socket_address_by_default():
    request = _request({"X-Forwarded-For": "10.0.0.1"})

    assert client_address(request) == "203.0.113.7"


def test_uses_first_forwarded_hop_when_trusted():
    request = _request({"X-Forwarded-For": "10.0.0.1, 172.16.0.1"})

    assert client_address(request, trust_forwarded=True) == "10.0.0.1"


def test_trusted_without_header_falls_back_to_socket():
    assert client_address(_request(), trust_forwarded=True) == "203.0.113.7"


def test_no_client_information():
    assert client_address(_request(client=None)) is None
