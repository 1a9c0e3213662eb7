from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SqlEnum, String
from sqlalchemy.orm import Mapped, mapped_column

from quickcheck.db.base import Base
from quickcheck.db.models.ids import prefixed_id


class CustomFieldType(str, Enum):
    text = "text"
    number = "number"
    checkbox = "checkbox"


class CustomField(Base):
    __tablename__ = "custom_fields"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=prefixed_id("cf"))
    name: Mapped[str] = mapped_column(String(80), nullable=False, index=True)
    label: Mapped[str] = mapped_column(String(120), nullable=False)
    type: Mapped[CustomFieldType] = mapped_column(SqlEnum(CustomFieldType), nullable=False, default=CustomFieldType.text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
