import httpx
import pytest


class DummyMCP:
    """Minimal FastMCP stand-in to capture resource registration."""

    def __init__(self) -> None:
        self.resources = {}

    def resource(self, uri: str, *, name=None, title=None, description=None, mime_type=None, meta=None):
        def _decorator(fn):
            self.resources[uri] = {
                "fn": fn,
                "name": name,
                "title": title,
                "description": description,
                "mime_type": mime_type,
                "meta": meta,
            }
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


def patch_github_transport(monkeypatch, client, routes: dict, calls: list | None = None):
    """
    Patch GitHubClient._create_client() to use httpx.MockTransport.

    routes keys:
        (METHOD, PATH) -> httpx.Response  OR  (status_code, json)
    Unknown routes answer 404. Every request is appended to `calls` if given.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)

        key = (request.method.upper(), request.url.path)
        if key not in routes:
            return httpx.Response(404, json={"message": "Not Found"})

        val = routes[key]
        if isinstance(val, httpx.Response):
            return val
        if isinstance(val, BaseException):
            raise val

        status_code, js = val
        return httpx.Response(status_code, json=js)

    transport = httpx.MockTransport(handler)

    def _create_client():
        return httpx.AsyncClient(
            base_url=client._base_url,
            headers=client._headers,
            timeout=client._timeout,
            verify=client._verify,
            transport=transport,
        )

    monkeypatch.setattr(client, "_create_client", _create_client)


@pytest.fixture
def github_transport(monkeypatch):
    def _patch(client, routes, calls=None):
        patch_github_transport(monkeypatch, client, routes, calls)
    return _patch
