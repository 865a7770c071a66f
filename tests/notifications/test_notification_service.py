from __future__ import annotations

from datetime import date

import pytest

from src.hrms.hrms.core.exceptions import NotFoundError, ValidationError
from src.hrms.hrms.notifications import service as notification_service
from src.hrms.hrms.notifications.service import NotificationService

from tests.fakes import FakeNotificationRepo


@pytest.fixture
def svc():
    return NotificationService(FakeNotificationRepo())


def test_create_stamps_today(svc, monkeypatch):
    monkeypatch.setattr(notification_service, "today", lambda: date(2026, 3, 1))

    notice = svc.create({"notice_title": "Holiday", "notice_content": "Office closed"})

    assert notice.date == date(2026, 3, 1)
    assert notice.notice_id.startswith("notice_")


def test_create_keeps_given_date(svc):
    notice = svc.create({"notice_title": "Audit", "date": "2026-04-15"})
    assert notice.date == date(2026, 4, 15)


def test_title_is_required(svc):
    with pytest.raises(ValidationError):
        svc.create({"notice_title": " "})


def test_search_edit_delete(svc):
    first = svc.create({"notice_title": "Quarterly meeting"})
    svc.create({"notice_title": "Fire drill"})

    assert svc.query_by_title("all").total == 2
    assert [n.notice_id for n in svc.query_by_title("meeting").items] == [first.notice_id]

    svc.edit({"notice_id": first.notice_id, "notice_title": "Annual meeting", "type": "event"})
    assert svc.query_by_title("Annual").items[0].type == "event"

    svc.delete(first.notice_id)
    assert svc.query_by_title("meeting").total == 0
    with pytest.raises(NotFoundError):
        svc.delete(first.notice_id)
    with pytest.raises(NotFoundError):
        svc.edit({"notice_id": first.notice_id, "notice_title": "x"})
