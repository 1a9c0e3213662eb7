from datetime import datetime

from pydantic import BaseModel, ConfigDict

from quickcheck.db.models import CustomFieldType, ReviewChannel, UserRole


class UserCreate(BaseModel):
    name: str
    role: UserRole


class HostCreate(BaseModel):
    name: str
    department: str = ""


class HostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    department: str


class CustomFieldCreate(BaseModel):
    label: str
    name: str | None = None
    type: CustomFieldType = CustomFieldType.text


class CustomFieldOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    label: str
    type: CustomFieldType


class NotificationSettingsPayload(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    auto_send_on_checkout: bool
    email_template: str
    sms_template: str


class ReviewRequestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    visit_id: str
    guest_name: str
    channel: ReviewChannel
    sent_at: datetime
