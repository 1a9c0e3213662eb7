from datetime import datetime

from sqlalchemy import func

from quickcheck.db.models import Appointment, AppointmentStatus
from quickcheck.db.store import Store


def create_appointment(
    store: Store,
    host_id: str,
    guest_name: str,
    guest_id_number: str,
    now: datetime | None = None,
) -> Appointment:
    return store.insert(
        Appointment(
            host_id=host_id,
            guest_name=guest_name.strip(),
            guest_id_number=guest_id_number.strip(),
            created_at=now or datetime.utcnow(),
            status=AppointmentStatus.scheduled,
        )
    )


def list_appointments_for_host(store: Store, host_id: str) -> list[Appointment]:
    return store.find(
        Appointment,
        Appointment.host_id == host_id,
        order_by=(Appointment.created_at.desc(),),
    )


def find_appointment_by_id_number(store: Store, id_number: str) -> Appointment | None:
    return store.find_one(
        Appointment,
        func.lower(Appointment.guest_id_number) == id_number.lower(),
        order_by=(Appointment.created_at.asc(),),
    )
