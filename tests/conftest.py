import copy
import json
import time

import pytest

from marine_relay import create_app
from marine_relay.config import TestingConfig

# Фикстура upstream подменяет time.sleep; медленному телу нужен настоящий
_real_sleep = time.sleep


class DummyRaw:
    """Замена urllib3-ответа: тело отдаётся кусками через read1."""

    def __init__(self, body, chunk_size=None, delay=0.0, connection=None):
        self._body = body
        self._initial_body = body
        self._chunk_size = chunk_size or max(len(body), 1)
        self._delay = delay
        self.connection = connection
        self.reads = 0

    def read1(self, amt=None, decode_content=None):
        if self._delay:
            _real_sleep(self._delay)
        self.reads += 1
        chunk, self._body = self._body[:self._chunk_size], self._body[self._chunk_size:]
        return chunk


class DummyResponse:
    """Минимальная замена requests.Response (stream=True) для фейкового SLIP."""

    def __init__(self, status_code=200, payload=None, text=None, chunk_size=None, delay=0.0, raw=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        if text is not None:
            body = text.encode("utf-8")
        elif payload is not None:
            body = json.dumps(payload).encode("utf-8")
        else:
            body = b""
        self.raw = raw or DummyRaw(body, chunk_size=chunk_size, delay=delay)
        self.closed = False

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class FakeUpstream:
    """Фейковый внешний сервис: отдаёт ответы по очереди и пишет хронологию.

    ``events``: список ("sleep", секунды) и ("get", url) в порядке вызова.
    Элемент очереди может быть DummyResponse или исключением (будет брошено).
    """

    def __init__(self):
        self.responses = []
        self.events = []
        self.requests = []

    def queue(self, *items):
        self.responses.extend(items)
        return self

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.events.append(("get", url))
        self.requests.append({"url": url, "headers": headers, "timeout": timeout, **kwargs})
        item = self.responses.pop(0) if len(self.responses) > 1 else self._repeat(self.responses[0])
        if isinstance(item, Exception):
            raise item
        return item

    @staticmethod
    def _repeat(item):
        # Повторно отдаваемый ответ получает свежее (непрочитанное) тело
        if hasattr(getattr(item, "raw", None), "_initial_body"):
            fresh = copy.copy(item)
            fresh.raw = copy.copy(item.raw)
            fresh.raw._body = item.raw._initial_body
            return fresh
        return item

    def sleep(self, seconds):
        self.events.append(("sleep", seconds))

    @property
    def attempts(self):
        return len(self.requests)

    @property
    def sleeps(self):
        return [s for kind, s in self.events if kind == "sleep"]


@pytest.fixture()
def app(tmp_path):
    class C(TestingConfig):
        NODE_MODULES_DIR = str(tmp_path / "node_modules")

    yield create_app(C)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr("marine_relay.services.fetch_client.requests.get", fake.get)
    monkeypatch.setattr("marine_relay.services.fetch_client.time.sleep", fake.sleep)
    return fake


def feature_collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}
