from datetime import datetime

from pydantic import BaseModel, ConfigDict

from quickcheck.db.models import AppointmentStatus


class AppointmentCreate(BaseModel):
    guest_name: str
    guest_id_number: str


class AppointmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    guest_name: str
    guest_id_number: str
    host_id: str
    created_at: datetime
    status: AppointmentStatus
