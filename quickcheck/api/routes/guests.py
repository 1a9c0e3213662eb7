from fastapi import APIRouter, Depends

from quickcheck.api.deps import get_store, require_roles
from quickcheck.db.models import User
from quickcheck.db.store import Store
from quickcheck.schemas.appointment import AppointmentOut
from quickcheck.schemas.guest import GuestCreate, GuestLookupResponse, GuestOut
from quickcheck.services.appointment_service import find_appointment_by_id_number
from quickcheck.services.guest_service import create_guest, search_guest_by_id_number

router = APIRouter()


@router.get("/lookup/{id_number}")
def lookup_guest(
    id_number: str,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("guard", "admin")),
):
    guest = search_guest_by_id_number(store, id_number)
    if guest:
        return {"data": GuestLookupResponse(guest=GuestOut.model_validate(guest))}
    appointment = find_appointment_by_id_number(store, id_number)
    return {
        "data": GuestLookupResponse(
            appointment=AppointmentOut.model_validate(appointment) if appointment else None,
        )
    }


@router.post("")
def add_guest(
    payload: GuestCreate,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("guard", "admin")),
):
    guest = create_guest(
        store,
        name=payload.name,
        id_number=payload.id_number,
        phone=payload.phone,
        email=payload.email,
        consent=payload.consent,
    )
    return {"data": GuestOut.model_validate(guest)}
