import logging
from time import perf_counter

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import Response

from quickcheck.api.deps import get_notification_transport, get_store, require_roles
from quickcheck.core.exceptions import AppException
from quickcheck.db.models import User, Visit
from quickcheck.db.store import Store
from quickcheck.schemas.guest import GuestOut
from quickcheck.schemas.visit import CheckInRequest, CheckInResponse, VisitCreate, VisitOut
from quickcheck.services.notification_service import NotificationTransport, run_check_in_notice
from quickcheck.services.report_service import export_visit_log_csv
from quickcheck.services.review_service import send_review_request
from quickcheck.services.visit_service import (
    approve_visit,
    check_in_guest,
    checkout_visit,
    create_visit,
    list_active_visits,
    list_recently_checked_out_visits,
    list_visit_log,
)
from quickcheck.socket.events import emit_visit_patch
from quickcheck.socket.server import sio

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/check-in")
async def visit_check_in(
    payload: CheckInRequest,
    background_tasks: BackgroundTasks,
    store: Store = Depends(get_store),
    user: User = Depends(require_roles("guard", "admin")),
):
    started = perf_counter()
    guest, visit, created = check_in_guest(
        store,
        checked_in_by=user.id,
        name=payload.name,
        id_number=payload.id_number,
        phone=payload.phone,
        email=payload.email,
        consent=payload.consent,
        host=payload.host,
        reason=payload.reason,
        device_info=payload.device_info,
        custom_fields=payload.custom_fields,
    )
    background_tasks.add_task(run_check_in_notice, visit.id)
    await emit_visit_patch(sio, "check_in", visit.id, "active")

    logger.info(
        "visit.check_in completed in %.1fms visit_id=%s guest_id=%s guest_created=%s",
        (perf_counter() - started) * 1000,
        visit.id,
        guest.id,
        created,
    )
    return {
        "data": CheckInResponse(
            guest=GuestOut.model_validate(guest),
            visit=VisitOut.model_validate(visit),
            guestCreated=created,
        )
    }


@router.post("")
async def visit_create(
    payload: VisitCreate,
    background_tasks: BackgroundTasks,
    store: Store = Depends(get_store),
    user: User = Depends(require_roles("guard", "admin")),
):
    visit = create_visit(
        store,
        guest_id=payload.guest_id,
        checked_in_by=user.id,
        host=payload.host,
        reason=payload.reason,
        device_info=payload.device_info,
        custom_fields=payload.custom_fields,
    )
    background_tasks.add_task(run_check_in_notice, visit.id)
    await emit_visit_patch(sio, "check_in", visit.id, "active")
    return {"data": VisitOut.model_validate(visit)}


@router.get("/active")
def visits_active(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("guard", "admin")),
):
    return {"data": list_active_visits(store)}


@router.get("/recent")
def visits_recently_checked_out(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("guard", "admin")),
):
    return {"data": list_recently_checked_out_visits(store)}


@router.get("/log")
def visits_log(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    return {"data": list_visit_log(store)}


@router.get("/log/export")
def visits_log_export(
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("admin")),
):
    return Response(
        content=export_visit_log_csv(store),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="visitor_log.csv"'},
    )


@router.post("/{visit_id}/checkout")
async def visit_checkout(
    visit_id: str,
    store: Store = Depends(get_store),
    transport: NotificationTransport = Depends(get_notification_transport),
    _: User = Depends(require_roles("guard", "admin")),
):
    try:
        visit = checkout_visit(store, visit_id, transport=transport)
    except AppException:
        # The checkout is committed before the automatic review request, which can still fail.
        if store.get(Visit, visit_id):
            await emit_visit_patch(sio, "checkout", visit_id, "checked_out")
        raise
    await emit_visit_patch(sio, "checkout", visit.id, "checked_out")
    return {"data": VisitOut.model_validate(visit)}


@router.post("/{visit_id}/approve")
def visit_approve(
    visit_id: str,
    store: Store = Depends(get_store),
    _: User = Depends(require_roles("host", "admin")),
):
    return {"data": VisitOut.model_validate(approve_visit(store, visit_id))}


@router.post("/{visit_id}/review-request")
def visit_review_request(
    visit_id: str,
    store: Store = Depends(get_store),
    transport: NotificationTransport = Depends(get_notification_transport),
    _: User = Depends(require_roles("admin")),
):
    visit = send_review_request(store, visit_id, transport=transport)
    return {"data": VisitOut.model_validate(visit)}
