import pytest

from quickcheck.core.exceptions import ValidationError
from quickcheck.core.security import decode_token
from quickcheck.db.models import CustomFieldType, UserRole
from quickcheck.db.models.notification_setting import DEFAULT_EMAIL_TEMPLATE, DEFAULT_SMS_TEMPLATE
from quickcheck.services.admin_service import (
    create_custom_field,
    create_host,
    create_user,
    field_name_from_label,
    list_custom_fields,
    list_hosts,
    list_users,
)
from quickcheck.services.auth_service import login_as_role
from quickcheck.services.settings_service import get_notification_settings, update_notification_settings


def test_login_picks_user_for_role(store, users):
    user, token = login_as_role(store, "guard")
    assert user.id == users["guard"].id
    payload = decode_token(token)
    assert payload["sub"] == users["guard"].id
    assert payload["role"] == "guard"


def test_login_unknown_role(store, users):
    with pytest.raises(ValidationError):
        login_as_role(store, "janitor")


def test_login_role_without_user(store):
    with pytest.raises(ValidationError):
        login_as_role(store, "admin")


def test_users_and_hosts(store, users):
    added = create_user(store, " New Guard ", UserRole.guard)
    assert added.name == "New Guard"
    assert added.id.startswith("user_")
    assert list_users(store)[-1].id == added.id

    host = create_host(store, "Reception", "Front Desk")
    assert [h.id for h in list_hosts(store)] == [host.id]


@pytest.mark.parametrize(
    "label,expected",
    [("Vehicle Number", "vehicle_number"), ("Company  Name", "company_name"), ("Badge", "badge")],
)
def test_field_name_from_label(label, expected):
    assert field_name_from_label(label) == expected


def test_custom_field_name_derivation(store):
    derived = create_custom_field(store, "Vehicle Number")
    explicit = create_custom_field(store, "Has Appointment", name="appt", field_type=CustomFieldType.checkbox)

    assert derived.name == "vehicle_number"
    assert derived.type == CustomFieldType.text
    assert explicit.name == "appt"
    assert [f.id for f in list_custom_fields(store)] == [derived.id, explicit.id]


def test_notification_settings_defaults_and_replace(store):
    assert get_notification_settings(store) == {
        "auto_send_on_checkout": False,
        "email_template": DEFAULT_EMAIL_TEMPLATE,
        "sms_template": DEFAULT_SMS_TEMPLATE,
    }

    updated = update_notification_settings(store, True, "E {{GUEST_NAME}}", "S {{GUEST_NAME}}")

    assert updated == {
        "auto_send_on_checkout": True,
        "email_template": "E {{GUEST_NAME}}",
        "sms_template": "S {{GUEST_NAME}}",
    }
    assert get_notification_settings(store) == updated
