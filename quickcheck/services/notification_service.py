import logging

from quickcheck.db.models import Guest, Visit
from quickcheck.db.session import SessionLocal
from quickcheck.db.store import Store

logger = logging.getLogger(__name__)


class NotificationTransport:
    """Hands outbound messages to the delivery provider.

    This implementation only logs each delivery; swap it for a real email/SMS
    gateway client in production.
    """

    def send(self, channel: str, recipient: str, body: str) -> None:
        logger.info("notification.deliver channel=%s recipient=%s body=%r", channel, recipient, body)


_default_transport = NotificationTransport()


def get_transport() -> NotificationTransport:
    return _default_transport


def notify_check_in(store: Store, visit_id: str, transport: NotificationTransport | None = None) -> bool:
    """Tell the host and the guest about a new check-in. Returns False if the visit is gone."""
    transport = transport or get_transport()
    visit = store.get(Visit, visit_id)
    if not visit:
        logger.warning("notification.check_in skipped visit_id=%s reason=visit_not_found", visit_id)
        return False
    guest = store.get(Guest, visit.guest_id)
    guest_name = guest.name if guest else "Unknown guest"

    transport.send("host", visit.host, f"{guest_name} has checked in to see you ({visit.reason or 'no reason given'}).")
    if guest and guest.email:
        transport.send("email", guest.email, f"Hi {guest.name}, you are checked in. {visit.host} has been notified.")
    elif guest and guest.phone:
        transport.send("sms", guest.phone, f"Hi {guest.name}, you are checked in. {visit.host} has been notified.")
    return True


def run_check_in_notice(visit_id: str) -> None:
    """Background entry point: owns its own session and never raises."""
    db = SessionLocal()
    try:
        notify_check_in(Store(db), visit_id)
    except Exception:
        logger.exception("notification.check_in failed visit_id=%s", visit_id)
    finally:
        db.close()
