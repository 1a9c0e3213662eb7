import logging

from quickcheck.core.config import get_settings
from quickcheck.db.models import Visit
from quickcheck.db.session import SessionLocal
from quickcheck.db.store import Store

settings = get_settings()
logger = logging.getLogger(__name__)


def _active_visit_count() -> int:
    db = SessionLocal()
    try:
        return len(Store(db).find(Visit, Visit.check_out_ts.is_(None)))
    finally:
        db.close()


def register_socket_events(sio):
    @sio.event(namespace=settings.DASHBOARD_NAMESPACE)
    async def connect(sid, environ, auth):
        try:
            active = _active_visit_count()
        except Exception:
            logger.exception("dashboard.snapshot failed sid=%s", sid)
            active = None
        await sio.emit(
            "dashboard.snapshot",
            {"data": {"message": "connected", "activeVisits": active}},
            to=sid,
            namespace=settings.DASHBOARD_NAMESPACE,
        )

    @sio.event(namespace=settings.DASHBOARD_NAMESPACE)
    async def disconnect(sid):
        logger.debug("dashboard.disconnect sid=%s", sid)


async def emit_visit_patch(sio, event: str, visit_id: str, state: str) -> None:
    await sio.emit(
        "visits.patch",
        {"data": {"event": event, "visitId": visit_id, "state": state}},
        namespace=settings.DASHBOARD_NAMESPACE,
    )
