from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SqlEnum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from quickcheck.db.base import Base
from quickcheck.db.models.ids import prefixed_id


class AppointmentStatus(str, Enum):
    scheduled = "scheduled"
    arrived = "arrived"


class Appointment(Base):
    __tablename__ = "appointments"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=prefixed_id("appt"))
    guest_name: Mapped[str] = mapped_column(String(120), nullable=False)
    guest_id_number: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    host_id: Mapped[str] = mapped_column(String(40), ForeignKey("users.id"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    status: Mapped[AppointmentStatus] = mapped_column(
        SqlEnum(AppointmentStatus), nullable=False, default=AppointmentStatus.scheduled
    )
