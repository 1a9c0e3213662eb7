from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from quickcheck.db.base import Base
from quickcheck.db.models.ids import prefixed_id


class Guest(Base):
    __tablename__ = "guests"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=prefixed_id("guest"))
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    # Lookup key, matched case-insensitively; not unique at the database level.
    id_number: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(40), default="")
    email: Mapped[str] = mapped_column(String(255), default="")
    consent: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
