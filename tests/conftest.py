import json

import httplib2
import pytest

from gapirest.access import auth

class FakeHttp():
    """
    Stands in for httplib2.Http, records every request and answers from a
    queue of canned (status, content) responses, 200 '{}' when empty.
    """

    def __init__(self) -> None:
        self.requests = []
        self.responses = []

    def respond(self, content=None, status: int = 200, headers: dict|None = None) -> None:
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.responses.append((status, content if content is not None else b"", headers or {}))

    def request(self, uri, method="GET", body=None, headers=None, redirections=5, connection_type=None):
        self.requests.append({"uri": uri, "method": method, "body": body, "headers": dict(headers or {})})
        if self.responses:
            status, content, extra = self.responses.pop(0)
        else:
            status, content, extra = 200, b"{}", {}
        info = {"status": str(status), "content-type": "application/json"}
        info.update(extra)
        return httplib2.Response(info), content

    @property
    def last(self) -> dict:
        return self.requests[-1]

    @property
    def last_json(self):
        body = self.last["body"]
        return json.loads(body) if body else None

@pytest.fixture
def http():
    return FakeHttp()

@pytest.fixture(autouse=True)
def reset_auth():
    auth.reset()
    yield
    auth.reset()
