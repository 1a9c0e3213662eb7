import logging
from datetime import datetime, timedelta
from typing import Any

from quickcheck.core.exceptions import NotFoundError
from quickcheck.db.models import ApprovalStatus, Guest, User, Visit
from quickcheck.db.store import Store
from quickcheck.schemas.auth import UserOut
from quickcheck.schemas.guest import GuestOut
from quickcheck.schemas.visit import VisitDetail
from quickcheck.services.guest_service import find_or_create_guest
from quickcheck.services.notification_service import NotificationTransport
from quickcheck.services.review_service import send_review_request
from quickcheck.services.settings_service import get_or_create_notification_settings

logger = logging.getLogger(__name__)

DEFAULT_HOST = "Reception"
RECENT_CHECKOUT_WINDOW = timedelta(hours=24)


def create_visit(
    store: Store,
    guest_id: str,
    checked_in_by: str,
    host: str | None = None,
    reason: str = "",
    device_info: str = "",
    custom_fields: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> Visit:
    if not store.get(Guest, guest_id):
        raise NotFoundError("Guest not found")

    visit = store.insert(
        Visit(
            guest_id=guest_id,
            check_in_ts=now or datetime.utcnow(),
            check_out_ts=None,
            host=(host or "").strip() or DEFAULT_HOST,
            reason=reason or "",
            device_info=device_info or "",
            custom_fields=dict(custom_fields or {}),
            checked_in_by=checked_in_by,
            approval_status=ApprovalStatus.pending,
            review_request_sent=False,
        )
    )
    logger.info("visit.created visit_id=%s guest_id=%s host=%s", visit.id, guest_id, visit.host)
    return visit


def check_in_guest(
    store: Store,
    checked_in_by: str,
    name: str,
    id_number: str,
    phone: str = "",
    email: str = "",
    consent: bool = False,
    host: str | None = None,
    reason: str = "",
    device_info: str = "",
    custom_fields: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> tuple[Guest, Visit, bool]:
    """Find-or-create the guest by id number, then open a visit for them."""
    guest, created = find_or_create_guest(store, name, id_number, phone=phone, email=email, consent=consent)
    visit = create_visit(
        store,
        guest_id=guest.id,
        checked_in_by=checked_in_by,
        host=host,
        reason=reason,
        device_info=device_info,
        custom_fields=custom_fields,
        now=now,
    )
    return guest, visit, created


def checkout_visit(
    store: Store,
    visit_id: str,
    transport: NotificationTransport | None = None,
    now: datetime | None = None,
) -> Visit:
    visit = store.get(Visit, visit_id)
    if not visit:
        raise NotFoundError("Visit not found")

    checked_out_at = now or datetime.utcnow()
    changed = store.update_where(
        Visit,
        (Visit.id == visit_id, Visit.check_out_ts.is_(None)),
        {"check_out_ts": checked_out_at},
    )
    if not changed:
        # Already checked out: the timestamp moves to the latest checkout.
        store.update(visit, check_out_ts=checked_out_at)
    logger.info("visit.checked_out visit_id=%s repeated=%s", visit_id, not changed)

    if get_or_create_notification_settings(store).auto_send_on_checkout:
        return send_review_request(store, visit_id, transport=transport, now=now)
    return store.refresh(visit)


def approve_visit(store: Store, visit_id: str) -> Visit:
    visit = store.get(Visit, visit_id)
    if not visit:
        raise NotFoundError("Visit not found")
    visit = store.update(visit, approval_status=ApprovalStatus.approved)
    logger.info("visit.approved visit_id=%s", visit_id)
    return visit


def join_visit_details(store: Store, visits: list[Visit], include_user: bool = True) -> list[VisitDetail]:
    guest_ids = {v.guest_id for v in visits}
    guests = {g.id: g for g in store.find(Guest, Guest.id.in_(guest_ids))} if guest_ids else {}
    users: dict[str, User] = {}
    if include_user:
        user_ids = {v.checked_in_by for v in visits}
        users = {u.id: u for u in store.find(User, User.id.in_(user_ids))} if user_ids else {}

    details = []
    for visit in visits:
        guest = guests.get(visit.guest_id)
        user = users.get(visit.checked_in_by)
        details.append(
            VisitDetail.model_validate(visit).model_copy(
                update={
                    "guest": GuestOut.model_validate(guest) if guest else None,
                    "checked_in_by_user": UserOut.model_validate(user) if user else None,
                }
            )
        )
    return details


def list_active_visits(store: Store) -> list[VisitDetail]:
    rows = store.find(Visit, Visit.check_out_ts.is_(None), order_by=(Visit.check_in_ts.desc(),))
    return join_visit_details(store, rows)


def list_recently_checked_out_visits(store: Store, now: datetime | None = None) -> list[VisitDetail]:
    cutoff = (now or datetime.utcnow()) - RECENT_CHECKOUT_WINDOW
    rows = store.find(
        Visit,
        Visit.check_out_ts.is_not(None),
        Visit.approval_status == ApprovalStatus.approved,
        Visit.check_out_ts >= cutoff,
        order_by=(Visit.check_out_ts.desc(),),
    )
    return join_visit_details(store, rows)


def list_visit_log(store: Store) -> list[VisitDetail]:
    rows = store.find(Visit, order_by=(Visit.check_in_ts.desc(),))
    return join_visit_details(store, rows)


def list_visits_for_host(store: Store, host_name: str) -> list[VisitDetail]:
    """Completed visits for a host, i.e. the host's approval queue."""
    rows = store.find(
        Visit,
        Visit.host == host_name,
        Visit.check_out_ts.is_not(None),
        order_by=(Visit.check_in_ts.desc(),),
    )
    return join_visit_details(store, rows, include_user=False)
