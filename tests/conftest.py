import json

import pytest
import requests

from zzz_curator import downloader

INDEX_URL = "https://example.test/zzz/data/character.json"
DETAIL_URL = "https://example.test/zzz/data/ja/character"


class FakeResponse:
    def __init__(self, url, payload=None, status_code=200, reason="OK"):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    def raise_for_status(self):
        if not 200 <= self.status_code < 300:
            raise requests.HTTPError(f"{self.status_code} Error: {self.reason} for url: {self.url}", response=self)

    def json(self):
        if isinstance(self._payload, str):
            return json.loads(self._payload)
        return self._payload


class FakeApi:
    """Serves canned payloads by URL and records every request made."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        if url not in self.routes:
            return FakeResponse(url, status_code=404, reason="Not Found")
        return FakeResponse(url, self.routes[url])


@pytest.fixture
def index_payload():
    return {
        "1011": {"code": "Anby", "rank": 3},
        "1021": {"CodeName": "Nekomiya Mana", "rank": 4},
        "9999": {},
    }


@pytest.fixture
def detail_payloads():
    return {
        "1011": {"Id": 1011, "CodeName": "Anby", "Rarity": 3, "WeaponType": {"1": "Stun"}},
        "1021": {
            "Id": 1021,
            "CodeName": "Nekomiya Mana",
            "Rarity": 4,
            "Stats": {"Atk": 120, "AtkGrowth": 3},
            "Skill": {"Basic": {"Param": {"1": {"Main": 100, "MainGrowth": 10}}}},
        },
        "9999": {"Id": 9999, "Rarity": 5},
    }


@pytest.fixture
def fake_api(monkeypatch, index_payload, detail_payloads):
    routes = {INDEX_URL: index_payload}
    for key, payload in detail_payloads.items():
        routes[f"{DETAIL_URL}/{key}.json"] = payload
    api = FakeApi(routes)
    monkeypatch.setattr(downloader.requests, "get", api.get)
    return api
