"""Test the console entry point"""

import uvicorn

from event_timeline import main
from event_timeline.config import Settings


def test_run_serves_app_with_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(main, "get_settings", lambda: Settings(_env_file=None, host="127.0.0.1", port=9001, log_level="DEBUG"))

    main.run()

    assert calls == [(main.app, {"host": "127.0.0.1", "port": 9001, "log_level": "debug"})]
