from datetime import datetime, timedelta

import pytest

from quickcheck.core.exceptions import NotFoundError
from quickcheck.db.models import ApprovalStatus, Guest, ReviewRequest
from quickcheck.services.settings_service import update_notification_settings
from quickcheck.services.visit_service import (
    approve_visit,
    check_in_guest,
    checkout_visit,
    create_visit,
    list_active_visits,
    list_recently_checked_out_visits,
    list_visit_log,
    list_visits_for_host,
)

NOW = datetime(2026, 10, 19, 15, 0)


def _visit(store, guest, users, **kwargs):
    kwargs.setdefault("host", "Alice")
    kwargs.setdefault("reason", "Meeting")
    return create_visit(store, guest_id=guest.id, checked_in_by=users["guard"].id, **kwargs)


def test_create_visit_initial_state(store, guest, users):
    first = _visit(store, guest, users)
    second = _visit(store, guest, users, host="Bob", reason="Interview")

    assert first.id != second.id
    for visit in (first, second):
        assert visit.check_out_ts is None
        assert visit.approval_status == ApprovalStatus.pending
        assert visit.review_request_sent is False


def test_create_visit_defaults_host_to_reception(store, guest, users):
    assert _visit(store, guest, users, host="").host == "Reception"
    assert _visit(store, guest, users, host=None).host == "Reception"


def test_create_visit_keeps_custom_fields(store, guest, users):
    visit = _visit(store, guest, users, custom_fields={"company": "Acme", "has_appointment": True})
    assert visit.custom_fields == {"company": "Acme", "has_appointment": True}


def test_create_visit_unknown_guest(store, users):
    with pytest.raises(NotFoundError):
        create_visit(store, guest_id="guest_missing", checked_in_by=users["guard"].id)


def test_checkout_removes_visit_from_active_listing(store, guest, users):
    visit = _visit(store, guest, users)
    assert [v.id for v in list_active_visits(store)] == [visit.id]

    checked_out = checkout_visit(store, visit.id, now=NOW)

    assert checked_out.check_out_ts == NOW
    assert list_active_visits(store) == []


def test_repeated_checkout_moves_timestamp(store, guest, users):
    visit = _visit(store, guest, users)
    checkout_visit(store, visit.id, now=NOW)

    again = checkout_visit(store, visit.id, now=NOW + timedelta(minutes=5))

    assert again.id == visit.id
    assert again.check_out_ts == NOW + timedelta(minutes=5)
    assert list_active_visits(store) == []


def test_checkout_and_approve_missing_visit(store):
    with pytest.raises(NotFoundError):
        checkout_visit(store, "visit_missing")
    with pytest.raises(NotFoundError):
        approve_visit(store, "visit_missing")


def test_approve_is_repeatable(store, guest, users):
    visit = _visit(store, guest, users)
    assert approve_visit(store, visit.id).approval_status == ApprovalStatus.approved
    assert approve_visit(store, visit.id).approval_status == ApprovalStatus.approved


def test_checkout_with_auto_send_creates_one_email_request(store, guest, users, transport):
    update_notification_settings(
        store,
        auto_send_on_checkout=True,
        email_template="Hi {{GUEST_NAME}}: {{REVIEW_LINK}}",
        sms_template="{{GUEST_NAME}}",
    )
    visit = _visit(store, guest, users)

    checked_out = checkout_visit(store, visit.id, transport=transport, now=NOW)

    assert checked_out.review_request_sent is True
    requests = store.find(ReviewRequest)
    assert len(requests) == 1
    assert requests[0].channel.value == "email"
    assert requests[0].guest_name == "John Doe"
    assert transport.sent == [
        ("email", "john.doe@example.com", f"Hi John Doe: https://example.com/review/{visit.id}")
    ]


def test_checkout_without_auto_send_sends_nothing(store, guest, users, transport):
    visit = _visit(store, guest, users)
    checkout_visit(store, visit.id, transport=transport, now=NOW)
    assert store.find(ReviewRequest) == []
    assert transport.sent == []


def test_active_visits_newest_first_with_joins(store, guest, users):
    older = _visit(store, guest, users, now=NOW - timedelta(hours=2))
    newer = _visit(store, guest, users, now=NOW - timedelta(hours=1))

    rows = list_active_visits(store)

    assert [row.id for row in rows] == [newer.id, older.id]
    assert rows[0].guest.name == "John Doe"
    assert rows[0].checked_in_by_user.id == users["guard"].id


def test_recently_checked_out_window(store, guest, users):
    stale = _visit(store, guest, users, now=NOW - timedelta(hours=30))
    checkout_visit(store, stale.id, now=NOW - timedelta(hours=25))
    approve_visit(store, stale.id)

    recent = _visit(store, guest, users, now=NOW - timedelta(hours=2))
    checkout_visit(store, recent.id, now=NOW - timedelta(hours=1))
    approve_visit(store, recent.id)

    pending = _visit(store, guest, users, now=NOW - timedelta(hours=2))
    checkout_visit(store, pending.id, now=NOW - timedelta(minutes=10))

    rows = list_recently_checked_out_visits(store, now=NOW)
    assert [row.id for row in rows] == [recent.id]


def test_recently_checked_out_orders_by_checkout(store, guest, users):
    first_in = _visit(store, guest, users, now=NOW - timedelta(hours=5))
    second_in = _visit(store, guest, users, now=NOW - timedelta(hours=4))
    checkout_visit(store, second_in.id, now=NOW - timedelta(hours=3))
    checkout_visit(store, first_in.id, now=NOW - timedelta(hours=1))
    approve_visit(store, first_in.id)
    approve_visit(store, second_in.id)

    rows = list_recently_checked_out_visits(store, now=NOW)
    assert [row.id for row in rows] == [first_in.id, second_in.id]


def test_visit_log_includes_everything(store, guest, users):
    a = _visit(store, guest, users, now=NOW - timedelta(days=3))
    b = _visit(store, guest, users, now=NOW - timedelta(days=1))
    checkout_visit(store, a.id, now=NOW - timedelta(days=2))

    assert [row.id for row in list_visit_log(store)] == [b.id, a.id]


def test_visits_for_host_only_completed(store, guest, users):
    done = _visit(store, guest, users, host="Alice", now=NOW - timedelta(hours=3))
    checkout_visit(store, done.id, now=NOW - timedelta(hours=2))
    _visit(store, guest, users, host="Alice", now=NOW - timedelta(hours=1))
    other = _visit(store, guest, users, host="Bob", now=NOW - timedelta(hours=3))
    checkout_visit(store, other.id, now=NOW - timedelta(hours=2))

    rows = list_visits_for_host(store, "Alice")
    assert [row.id for row in rows] == [done.id]
    assert rows[0].guest.id == guest.id
    assert rows[0].checked_in_by_user is None


def test_check_in_existing_guest_then_checkout(store, guest, users, transport):
    update_notification_settings(
        store,
        auto_send_on_checkout=True,
        email_template="Hi {{GUEST_NAME}}, {{REVIEW_LINK}}",
        sms_template="Hi {{GUEST_NAME}}",
    )

    found, visit, created = check_in_guest(
        store,
        checked_in_by=users["guard"].id,
        name="Ignored Name",
        id_number="G1234567X",
        host="Alice",
        reason="Meeting",
    )

    assert created is False
    assert found.id == guest.id
    assert visit.guest_id == guest.id
    assert visit.host == "Alice"
    assert visit.check_out_ts is None
    assert len(store.find(Guest)) == 1

    checked_out = checkout_visit(store, visit.id, transport=transport)
    assert checked_out.check_out_ts is not None
    requests = store.find(ReviewRequest)
    assert len(requests) == 1
    assert requests[0].guest_name == guest.name
