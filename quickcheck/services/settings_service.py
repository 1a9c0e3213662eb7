from quickcheck.db.models import NotificationSetting
from quickcheck.db.models.notification_setting import SINGLETON_ID
from quickcheck.db.store import Store


def get_or_create_notification_settings(store: Store) -> NotificationSetting:
    row = store.get(NotificationSetting, SINGLETON_ID)
    if row:
        return row
    return store.insert(NotificationSetting(id=SINGLETON_ID))


def get_notification_settings(store: Store) -> dict:
    row = get_or_create_notification_settings(store)
    return {
        "auto_send_on_checkout": row.auto_send_on_checkout,
        "email_template": row.email_template,
        "sms_template": row.sms_template,
    }


def update_notification_settings(
    store: Store,
    auto_send_on_checkout: bool,
    email_template: str,
    sms_template: str,
) -> dict:
    # Wholesale replacement: every field is overwritten.
    row = get_or_create_notification_settings(store)
    store.update(
        row,
        auto_send_on_checkout=auto_send_on_checkout,
        email_template=email_template,
        sms_template=sms_template,
    )
    return get_notification_settings(store)
