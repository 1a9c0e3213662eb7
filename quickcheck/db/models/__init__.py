from quickcheck.db.models.appointment import Appointment, AppointmentStatus
from quickcheck.db.models.custom_field import CustomField, CustomFieldType
from quickcheck.db.models.guest import Guest
from quickcheck.db.models.notification_setting import (
    DEFAULT_EMAIL_TEMPLATE,
    DEFAULT_SMS_TEMPLATE,
    NotificationSetting,
)
from quickcheck.db.models.review import Review, ReviewChannel, ReviewRequest
from quickcheck.db.models.user import Host, User, UserRole
from quickcheck.db.models.visit import ApprovalStatus, Visit

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "ApprovalStatus",
    "CustomField",
    "CustomFieldType",
    "DEFAULT_EMAIL_TEMPLATE",
    "DEFAULT_SMS_TEMPLATE",
    "Guest",
    "Host",
    "NotificationSetting",
    "Review",
    "ReviewChannel",
    "ReviewRequest",
    "User",
    "UserRole",
    "Visit",
]
