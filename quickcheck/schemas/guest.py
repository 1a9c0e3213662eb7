from datetime import datetime

from pydantic import BaseModel, ConfigDict

from quickcheck.schemas.appointment import AppointmentOut


class GuestCreate(BaseModel):
    name: str
    id_number: str
    phone: str = ""
    email: str = ""
    consent: bool = False


class GuestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    id_number: str
    phone: str
    email: str
    consent: bool
    created_at: datetime


class GuestLookupResponse(BaseModel):
    guest: GuestOut | None = None
    appointment: AppointmentOut | None = None
