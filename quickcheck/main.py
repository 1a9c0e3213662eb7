import logging
from datetime import datetime, timedelta

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quickcheck.api.routes import api_router
from quickcheck.core.config import get_settings
from quickcheck.core.exceptions import register_exception_handlers
from quickcheck.core.logging import setup_logging
from quickcheck.db.base import Base
from quickcheck.db.models import (
    Appointment,
    ApprovalStatus,
    CustomField,
    CustomFieldType,
    Guest,
    Host,
    NotificationSetting,
    ReviewChannel,
    ReviewRequest,
    User,
    UserRole,
    Visit,
)
from quickcheck.db.models.notification_setting import SINGLETON_ID
from quickcheck.db.session import SessionLocal, engine
from quickcheck.middleware.request_context import RequestContextMiddleware, SimulatedLatencyMiddleware
from quickcheck.socket.server import sio

settings = get_settings()
setup_logging(logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger(__name__)

fastapi_app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
fastapi_app.include_router(api_router, prefix=settings.API_V1_PREFIX)
fastapi_app.add_middleware(SimulatedLatencyMiddleware, latency_ms=settings.SIMULATED_LATENCY_MS)
fastapi_app.add_middleware(RequestContextMiddleware)
fastapi_app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(fastapi_app)


def _seed_dev_data(db: Session):
    if db.query(User).count() > 0:
        return

    now = datetime.utcnow()
    guard = User(id="user_guard_01", name="Guard User", role=UserRole.guard, created_at=now)
    try:
        db.add_all(
            [
                User(id="user_admin_01", name="Admin User", role=UserRole.admin, created_at=now),
                guard,
                User(id="user_host_01", name="Host User", role=UserRole.host, created_at=now),
            ]
        )
        db.add_all(
            [
                Host(id="host_01", name="Alice", department="Engineering"),
                Host(id="host_02", name="Bob", department="Marketing"),
                Host(id="host_03", name="Host User", department="Product"),
                Host(id="host_reception", name="Reception", department="Front Desk"),
            ]
        )
        db.add(
            Guest(
                id="guest_01",
                name="John Doe",
                id_number="G1234567X",
                phone="91234567",
                email="john.doe@example.com",
                consent=True,
                created_at=now,
            )
        )
        db.flush()

        db.add_all(
            [
                Visit(
                    id="visit_01",
                    guest_id="guest_01",
                    check_in_ts=now - timedelta(hours=3),
                    check_out_ts=now - timedelta(hours=2),
                    host="Alice",
                    reason="Meeting",
                    device_info="MacBook Pro",
                    custom_fields={},
                    checked_in_by=guard.id,
                    approval_status=ApprovalStatus.approved,
                    review_request_sent=True,
                ),
                Visit(
                    id="visit_02",
                    guest_id="guest_01",
                    check_in_ts=now - timedelta(hours=1),
                    host="Bob",
                    reason="Interview",
                    custom_fields={},
                    checked_in_by=guard.id,
                ),
                Visit(
                    id="visit_03",
                    guest_id="guest_01",
                    check_in_ts=now - timedelta(hours=5),
                    check_out_ts=now - timedelta(hours=4),
                    host="Host User",
                    reason="Demo",
                    device_info="iPad",
                    custom_fields={},
                    checked_in_by=guard.id,
                ),
            ]
        )
        db.add_all(
            [
                CustomField(id="cf_01", name="company", label="Company Name", type=CustomFieldType.text, created_at=now),
                CustomField(
                    id="cf_02",
                    name="has_appointment",
                    label="Has Appointment",
                    type=CustomFieldType.checkbox,
                    created_at=now + timedelta(microseconds=1),
                ),
            ]
        )
        db.add(
            Appointment(
                id="appt_01",
                guest_name="Scheduled Guest",
                guest_id_number="S1234567A",
                host_id="user_host_01",
                created_at=now,
            )
        )
        db.add(NotificationSetting(id=SINGLETON_ID))
        db.flush()

        db.add(
            ReviewRequest(
                id="rr_01",
                visit_id="visit_01",
                guest_name="John Doe",
                channel=ReviewChannel.email,
                sent_at=now - timedelta(hours=2),
            )
        )
        db.commit()
        logger.info("seeded demo data")
    except IntegrityError:
        # Another worker/process already inserted seed rows.
        db.rollback()


@fastapi_app.on_event("startup")
async def on_startup():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if settings.SEED_DEMO_DATA:
            _seed_dev_data(db)
    finally:
        db.close()


app = socketio.ASGIApp(
    sio,
    other_asgi_app=fastapi_app,
    socketio_path=settings.SOCKET_PATH.lstrip("/"),
)
