from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from quickcheck.db.base import Base

SINGLETON_ID = "default"

DEFAULT_EMAIL_TEMPLATE = (
    "Hi {{GUEST_NAME}},\n\n"
    "Thanks for visiting us! We'd love to get your feedback.\n\n"
    "Please complete our short survey here: {{REVIEW_LINK}}\n\n"
    "Best,\nThe Team"
)
DEFAULT_SMS_TEMPLATE = "Hi {{GUEST_NAME}}, thanks for visiting! Please give us your feedback here: {{REVIEW_LINK}}"


class NotificationSetting(Base):
    __tablename__ = "notification_settings"

    id: Mapped[str] = mapped_column(String(16), primary_key=True, default=SINGLETON_ID)
    auto_send_on_checkout: Mapped[bool] = mapped_column(Boolean, default=False)
    email_template: Mapped[str] = mapped_column(Text, default=DEFAULT_EMAIL_TEMPLATE)
    sms_template: Mapped[str] = mapped_column(Text, default=DEFAULT_SMS_TEMPLATE)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
