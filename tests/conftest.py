"""Shared test doubles for collaborator protocols."""

import pytest


class RecordingContentLoader:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def load_by_isbn(self, isbn):
        self.calls.append(isbn)
        return self.result


class RecordingShortener:
    def __init__(self, result="https://lib.example.org/short/abc"):
        self.result = result
        self.calls = []

    def shorten(self, url):
        self.calls.append(url)
        return self.result

    def resolve(self, short_id):
        return "https://lib.example.org/Record/1"


class CountingNonceGenerator:
    def __init__(self):
        self.count = 0

    def get_nonce(self):
        self.count += 1
        return f"nonce-{self.count}"


class FakeRedis:
    """Just enough of redis.Redis (decode_responses=True) for short links."""

    def __init__(self):
        self.data = {}

    def set(self, key, value, nx=False):
        if nx and key in self.data:
            return None
        self.data[key] = value
        return True

    def get(self, key):
        return self.data.get(key)

    def ping(self):
        return True


@pytest.fixture
def fake_redis():
    return FakeRedis()
