"""Pytest fixtures building WikiTree style records."""

import json

import httpx
import pytest


def person_record(person_id, name, gender=None, father=None, mother=None, **fields):
    """A getAncestors / getPerson style person record."""
    record = {"Id": person_id, "Name": name, "IsLiving": 0}
    if gender is not None:
        record["Gender"] = gender
    if father is not None:
        record["Father"] = father
    if mother is not None:
        record["Mother"] = mother
    record.update(fields)
    return record


@pytest.fixture
def make_person():
    """Factory for person records."""
    return person_record


@pytest.fixture
def churchill_records():
    """Winston Churchill and his parents, as getAncestors returns them."""
    return [
        person_record(
            5589, "Churchill-4", "Male", father=1001, mother=1002,
            ShortName="Winston Churchill", BirthDate="1874-11-30", DeathDate="1965-01-24",
        ),
        person_record(
            1001, "Churchill-25", "Male", father=0, mother=0,
            ShortName="Randolph Churchill", BirthDate="1849-02-13", DeathDate="1895-01-24",
        ),
        person_record(
            1002, "Jerome-1", "Female", father=0, mother=0,
            ShortName="Jennie Jerome", BirthDate="1854-01-09", DeathDate="1921-06-29",
        ),
    ]


@pytest.fixture
def churchill_ancestors_result(churchill_records):
    """Full getAncestors result record for Churchill-4."""
    return {"user_name": "Churchill-4", "ancestors": churchill_records, "status": 0}


@pytest.fixture
def churchill_person_result():
    """getPerson result for Churchill-4 with parents keyed by Person.Id."""
    return {
        "user_name": "Churchill-4",
        "user_id": 5589,
        "status": 0,
        "person": person_record(
            5589, "Churchill-4", "Male", father=1001, mother=1002,
            ShortName="Winston Churchill", BirthDate="1874-11-30", DeathDate="1965-01-24",
            Parents={
                "1001": person_record(1001, "Churchill-25", "Male", ShortName="Randolph Churchill"),
                "1002": person_record(1002, "Jerome-1", "Female", ShortName="Jennie Jerome"),
            },
            Spouses={"1003": person_record(1003, "Hozier-1", "Female")},
            Children=[],
        ),
    }


class FakeWikiTreeServer:
    """httpx.MockTransport handler answering by ``action`` query parameter."""

    def __init__(self):
        self.responses = {}
        self.requests = []

    def respond(self, action, body="", status_code=200, cookies=None):
        """Queue the answer for an action; body is JSON-encoded unless it is a string."""
        self.responses[action] = (body, status_code, cookies or {})

    def __call__(self, request):
        self.requests.append(request)
        action = request.url.params.get("action")
        body, status_code, cookies = self.responses.get(action, ("", 200, {}))
        content = body if isinstance(body, str) else json.dumps(body)
        headers = [("set-cookie", f"{name}={value}; Path=/") for name, value in cookies.items()]
        return httpx.Response(status_code, content=content.encode(), headers=headers)

    @property
    def last_params(self):
        return dict(self.requests[-1].url.params)


@pytest.fixture
def server():
    """A fake WikiTree API server."""
    return FakeWikiTreeServer()


@pytest.fixture
def api_client(server):
    """WikiTreeApiClient talking to the fake server."""
    from wikitree_api.api.client import WikiTreeApiClient
    from wikitree_api.api.config import ApiConfig

    config = ApiConfig(base_url="https://api.example.test/api.php", app_id="tests")
    http_client = httpx.Client(transport=httpx.MockTransport(server))
    with WikiTreeApiClient(config, http_client) as client:
        yield client


@pytest.fixture
def session(api_client):
    """WikiTreeSession over the fake server."""
    from wikitree_api.family.session import WikiTreeSession

    return WikiTreeSession(client=api_client)
