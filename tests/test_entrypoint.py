# File: tests/test_entrypoint.py

from getlocalbuddy import __main__ as entrypoint
from getlocalbuddy.core.config import settings


def test_main_trusts_proxy_headers(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(entrypoint.uvicorn, "run", fake_run)
    entrypoint.main()

    assert calls["app"] == "getlocalbuddy.main:app"
    assert calls["port"] == settings.port
    assert calls["proxy_headers"] is True
    assert calls["forwarded_allow_ips"] == settings.forwarded_allow_ips
