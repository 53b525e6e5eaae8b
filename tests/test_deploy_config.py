import os
import runpy

CONF = os.path.join(os.path.dirname(os.path.dirname(__file__)), "deploy", "gunicorn.conf.py")


def test_worker_timeout_covers_slowest_layer(monkeypatch):
    monkeypatch.delenv("WEB_CONCURRENCY", raising=False)
    monkeypatch.setenv("PORT", "8123")
    conf = runpy.run_path(CONF)

    # 3 попытки по (0.5 + 5) с и backoff 1 + 2 с
    assert conf["_slowest_layer_sec"] == 19.5
    assert conf["timeout"] > conf["_slowest_layer_sec"]
    assert conf["bind"] == "0.0.0.0:8123"
    assert conf["worker_class"] == "gthread"
    assert conf["workers"] >= 2


def test_concurrency_from_env(monkeypatch):
    monkeypatch.setenv("WEB_CONCURRENCY", "3")
    monkeypatch.setenv("GUNICORN_THREADS", "4")
    conf = runpy.run_path(CONF)
    assert (conf["workers"], conf["threads"]) == (3, 4)
