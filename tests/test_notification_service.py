from quickcheck.services.guest_service import create_guest
from quickcheck.services.notification_service import notify_check_in, run_check_in_notice
from quickcheck.services.visit_service import create_visit


def test_check_in_notice_goes_to_host_and_guest_email(store, guest, users, transport):
    visit = create_visit(store, guest_id=guest.id, checked_in_by=users["guard"].id, host="Alice", reason="Meeting")

    assert notify_check_in(store, visit.id, transport=transport) is True

    assert [(channel, recipient) for channel, recipient, _ in transport.sent] == [
        ("host", "Alice"),
        ("email", "john.doe@example.com"),
    ]
    assert "John Doe" in transport.sent[0][2]


def test_check_in_notice_uses_phone_without_email(store, users, transport):
    walk_in = create_guest(store, "Sam Lee", "S7654321B", phone="98765432")
    visit = create_visit(store, guest_id=walk_in.id, checked_in_by=users["guard"].id)

    notify_check_in(store, visit.id, transport=transport)

    assert [(channel, recipient) for channel, recipient, _ in transport.sent] == [
        ("host", "Reception"),
        ("sms", "98765432"),
    ]


def test_check_in_notice_for_missing_visit(store, transport):
    assert notify_check_in(store, "visit_missing", transport=transport) is False
    assert transport.sent == []


def test_background_notice_never_raises():
    run_check_in_notice("visit_missing")
