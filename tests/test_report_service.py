import csv
import io
from datetime import datetime, timedelta

from quickcheck.services.report_service import VISIT_LOG_COLUMNS, export_visit_log_csv
from quickcheck.services.review_service import send_review_request
from quickcheck.services.visit_service import checkout_visit, create_visit

NOW = datetime(2026, 10, 19, 15, 0)


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def test_export_empty_log_has_header_only(store):
    assert _rows(export_visit_log_csv(store)) == [VISIT_LOG_COLUMNS]


def test_export_rows_newest_first(store, guest, users):
    old = create_visit(
        store, guest_id=guest.id, checked_in_by=users["guard"].id, host="Alice", reason="Meeting",
        now=NOW - timedelta(days=1),
    )
    create_visit(store, guest_id=guest.id, checked_in_by=users["admin"].id, reason='Said "hi", left', now=NOW)
    checkout_visit(store, old.id, now=NOW - timedelta(days=1) + timedelta(hours=2))

    header, newest, oldest = _rows(export_visit_log_csv(store))

    assert header == VISIT_LOG_COLUMNS
    assert newest == [
        "John Doe", "G1234567X", "2026-10-19 15:00:00", "Active",
        "Reception", 'Said "hi", left', "Admin User", "No",
    ]
    assert oldest == [
        "John Doe", "G1234567X", "2026-10-18 15:00:00", "2026-10-18 17:00:00",
        "Alice", "Meeting", "Guard User", "No",
    ]


def test_export_marks_sent_review_requests(store, guest, users, transport):
    visit = create_visit(store, guest_id=guest.id, checked_in_by=users["guard"].id, now=NOW)
    send_review_request(store, visit.id, transport=transport, now=NOW)

    rows = _rows(export_visit_log_csv(store))
    assert rows[1][-1] == "Yes"
