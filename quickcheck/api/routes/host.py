from fastapi import APIRouter, Depends

from quickcheck.api.deps import get_store, require_roles
from quickcheck.db.models import User
from quickcheck.db.store import Store
from quickcheck.schemas.appointment import AppointmentCreate, AppointmentOut
from quickcheck.services.appointment_service import create_appointment, list_appointments_for_host
from quickcheck.services.visit_service import list_visits_for_host

router = APIRouter()


@router.get("/visits")
def host_visits(
    store: Store = Depends(get_store),
    user: User = Depends(require_roles("host")),
):
    return {"data": list_visits_for_host(store, user.name)}


@router.get("/appointments")
def host_appointments(
    store: Store = Depends(get_store),
    user: User = Depends(require_roles("host")),
):
    rows = list_appointments_for_host(store, user.id)
    return {"data": [AppointmentOut.model_validate(row) for row in rows]}


@router.post("/appointments")
def host_create_appointment(
    payload: AppointmentCreate,
    store: Store = Depends(get_store),
    user: User = Depends(require_roles("host")),
):
    row = create_appointment(
        store,
        host_id=user.id,
        guest_name=payload.guest_name,
        guest_id_number=payload.guest_id_number,
    )
    return {"data": AppointmentOut.model_validate(row)}
