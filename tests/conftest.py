from __future__ import annotations

from typing import Any, Callable

import pytest
import requests

from ecb_fx.ingestion.models import FeedContent

FEED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
    <gesmes:subject>Reference rates</gesmes:subject>
    <Cube>
        <Cube time='{time}'>
{cubes}
        </Cube>
    </Cube>
</gesmes:Envelope>
"""


def build_feed(rates: dict[str, str], *, time: str = "2024-05-02") -> str:
    cubes = "\n".join(
        f"            <Cube currency='{code}' rate='{rate}'/>" for code, rate in rates.items()
    )
    return FEED_TEMPLATE.format(time=time, cubes=cubes)


def make_response(
    body: str,
    *,
    status: int = 200,
    reason: str = "OK",
    content_type: str | None = "text/xml",
    url: str = "https://example.test/feed.xml",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.url = url
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    if content_type is not None:
        response.headers["Content-Type"] = content_type
    return response


class FakeSession:
    """Stands in for ``requests.Session`` and records every GET."""

    def __init__(
        self,
        response: requests.Response | None = None,
        error: Exception | None = None,
    ) -> None:
        self.headers: dict[str, str] = {}
        self.response = response
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


class StubSource:
    """Rate source returning canned content or raising a canned error."""

    def __init__(self, content: FeedContent | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls = 0

    def fetch(self) -> FeedContent:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.content is not None
        return self.content


@pytest.fixture
def feed_builder() -> Callable[..., str]:
    return build_feed
