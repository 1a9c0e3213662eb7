from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Enum as SqlEnum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from quickcheck.db.base import Base
from quickcheck.db.models.ids import prefixed_id


class ApprovalStatus(str, Enum):
    pending = "pending"
    approved = "approved"


class Visit(Base):
    __tablename__ = "visits"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=prefixed_id("visit"))
    guest_id: Mapped[str] = mapped_column(String(40), ForeignKey("guests.id"), nullable=False, index=True)
    check_in_ts: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
    check_out_ts: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)
    # Display name of whoever is being visited, not a foreign key.
    host: Mapped[str] = mapped_column(String(120), nullable=False, default="Reception", index=True)
    reason: Mapped[str] = mapped_column(String(255), default="")
    device_info: Mapped[str] = mapped_column(String(255), default="")
    custom_fields: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    checked_in_by: Mapped[str] = mapped_column(String(40), ForeignKey("users.id"), nullable=False)
    approval_status: Mapped[ApprovalStatus] = mapped_column(
        SqlEnum(ApprovalStatus), nullable=False, default=ApprovalStatus.pending
    )
    review_request_sent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
