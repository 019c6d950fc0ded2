import json
from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger

from youtrack_api_util.youtrack_utils import YouTrackAPIAdapter

NOW = datetime.now(timezone.utc)


def to_millis(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


OLD_MS = to_millis(NOW - timedelta(days=5 * 365))
FRESH_MS = to_millis(NOW - timedelta(days=30))


def attachment_json(attachment_id: str, size: int, old: bool = False) -> dict:
    ts = OLD_MS if old else FRESH_MS
    return {'id': attachment_id, 'size': size, 'created': ts, 'updated': ts}


def issue_json(issue_id: str, project: str, attachments: list[dict]) -> dict:
    return {'idReadable': issue_id, 'project': {'name': project}, 'attachments': attachments}


class FakeResponse:
    def __init__(self, status_code: int = 200, body=None, text: str | None = None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body if body is not None else [])


class FakeSession:
    """Записывает запросы и отдает заранее заданные ответы."""

    def __init__(self, pages: list | None = None, delete_statuses: dict | None = None):
        self.pages = list(pages or [])
        self.delete_statuses = delete_statuses or {}
        self.calls: list[tuple[str, str, dict | None]] = []
        self.closed = False

    def get(self, url, params=None, **kwargs):
        self.calls.append(('GET', url, dict(params or {})))
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, FakeResponse):
            return page
        return FakeResponse(200, page)

    def delete(self, url, **kwargs):
        self.calls.append(('DELETE', url, None))
        status = self.delete_statuses.get(url, 200)
        if isinstance(status, Exception):
            raise status
        return FakeResponse(status, text='')

    def close(self):
        self.closed = True

    @property
    def get_calls(self):
        return [c for c in self.calls if c[0] == 'GET']

    @property
    def delete_calls(self):
        return [c for c in self.calls if c[0] == 'DELETE']


@pytest.fixture
def make_adapter():
    def _make(pages=None, delete_statuses=None):
        session = FakeSession(pages, delete_statuses)
        return YouTrackAPIAdapter('https://yt.example.com/api/issues', 'token', 20, session=session), session

    return _make


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    delays = []
    monkeypatch.setattr('youtrack_api_util.youtrack_utils.time.sleep', delays.append)
    return delays


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record), level='DEBUG')
    yield messages
    logger.remove(handler_id)
