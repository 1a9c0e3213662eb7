from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from quickcheck.db.models import ApprovalStatus
from quickcheck.schemas.auth import UserOut
from quickcheck.schemas.guest import GuestOut


class VisitCreate(BaseModel):
    guest_id: str
    host: str | None = None
    reason: str = ""
    device_info: str = ""
    custom_fields: dict[str, Any] = Field(default_factory=dict)


class CheckInRequest(BaseModel):
    name: str
    id_number: str
    phone: str = ""
    email: str = ""
    consent: bool = False
    host: str | None = None
    reason: str = ""
    device_info: str = ""
    custom_fields: dict[str, Any] = Field(default_factory=dict)


class VisitOut(BaseModel):
    """A stored visit, exactly as persisted."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    guest_id: str
    check_in_ts: datetime
    check_out_ts: datetime | None
    host: str
    reason: str
    device_info: str
    custom_fields: dict[str, Any]
    checked_in_by: str
    approval_status: ApprovalStatus
    review_request_sent: bool


class VisitDetail(VisitOut):
    """Display record: a visit joined with its guest and the user who checked it in."""

    guest: GuestOut | None = None
    checked_in_by_user: UserOut | None = None


class CheckInResponse(BaseModel):
    guest: GuestOut
    visit: VisitOut
    guestCreated: bool
