from fastapi import APIRouter, Depends

from quickcheck.api.deps import get_store, require_roles
from quickcheck.db.models import User
from quickcheck.db.store import Store
from quickcheck.schemas.appointment import AppointmentOut
from quickcheck.services.appointment_service import find_appointment_by_id_number

router = APIRouter()


@router.get("/lookup/{id_number}")
def lookup_appointment(
    id_number: str,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("guard", "admin")),
):
    appointment = find_appointment_by_id_number(store, id_number)
    return {"data": AppointmentOut.model_validate(appointment) if appointment else None}
