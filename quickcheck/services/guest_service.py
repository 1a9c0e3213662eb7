import logging
from datetime import datetime

from sqlalchemy import func

from quickcheck.db.models import Guest
from quickcheck.db.store import Store

logger = logging.getLogger(__name__)


def search_guest_by_id_number(store: Store, id_number: str) -> Guest | None:
    return store.find_one(
        Guest,
        func.lower(Guest.id_number) == id_number.lower(),
        order_by=(Guest.created_at.asc(),),
    )


def create_guest(
    store: Store,
    name: str,
    id_number: str,
    phone: str = "",
    email: str = "",
    consent: bool = False,
    now: datetime | None = None,
) -> Guest:
    guest = store.insert(
        Guest(
            name=name.strip(),
            id_number=id_number.strip(),
            phone=(phone or "").strip(),
            email=(email or "").strip(),
            consent=consent,
            created_at=now or datetime.utcnow(),
        )
    )
    logger.info("guest.created guest_id=%s", guest.id)
    return guest


def find_or_create_guest(
    store: Store,
    name: str,
    id_number: str,
    phone: str = "",
    email: str = "",
    consent: bool = False,
) -> tuple[Guest, bool]:
    """Returns ``(guest, created)``. A matching guest is returned unchanged."""
    guest = search_guest_by_id_number(store, id_number)
    if guest:
        return guest, False
    return create_guest(store, name, id_number, phone=phone, email=email, consent=consent), True
