import logging
from pathlib import Path

import pytest

from stribot.logger import app_logger

RESOURCES = Path(__file__).parent / "resources"


class FakeResponse:
    def __init__(self, text, status_code=200, content_type="text/html"):
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        self.encoding = None


@pytest.fixture()
def load_resource():
    def _load(name):
        return (RESOURCES / name).read_text(encoding="utf-8")
    return _load


@pytest.fixture()
def fake_request_factory():
    """Returns a request function serving ``responses`` in order and recording calls."""

    def _factory(responses):
        calls = []
        queue = list(responses)

        def _request(url, params=None, headers=None, timeout=None):
            calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
            item = queue.pop(0)
            if isinstance(item, Exception):
                raise item
            return item

        return _request, calls

    return _factory


@pytest.fixture(autouse=True)
def _isolated_app_logger(monkeypatch, tmp_path):
    """Keep CLI log files under tmp_path and reset the stribot logger afterwards."""
    monkeypatch.setattr(app_logger, "get_project_root", lambda: tmp_path)
    yield
    stribot_logger = logging.getLogger(app_logger.LOGGER_NAME)
    for handler in list(stribot_logger.handlers):
        stribot_logger.removeHandler(handler)
        handler.close()
    stribot_logger.setLevel(logging.NOTSET)
    stribot_logger.propagate = True
