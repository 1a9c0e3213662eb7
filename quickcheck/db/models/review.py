from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SqlEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from quickcheck.db.base import Base
from quickcheck.db.models.ids import prefixed_id


class ReviewChannel(str, Enum):
    email = "email"
    sms = "sms"


class ReviewRequest(Base):
    __tablename__ = "review_requests"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=prefixed_id("rr"))
    visit_id: Mapped[str] = mapped_column(String(40), ForeignKey("visits.id"), nullable=False, unique=True, index=True)
    guest_name: Mapped[str] = mapped_column(String(120), nullable=False)
    channel: Mapped[ReviewChannel] = mapped_column(SqlEnum(ReviewChannel), nullable=False)
    sent_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)


class Review(Base):
    __tablename__ = "reviews"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=prefixed_id("review"))
    visit_id: Mapped[str] = mapped_column(String(40), ForeignKey("visits.id"), nullable=False, index=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
