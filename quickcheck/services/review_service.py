import logging
from datetime import datetime

from quickcheck.core.config import get_settings
from quickcheck.core.exceptions import ConflictError, NotFoundError, ValidationError
from quickcheck.db.models import Guest, Review, ReviewChannel, ReviewRequest, Visit
from quickcheck.db.store import Store
from quickcheck.services.notification_service import NotificationTransport, get_transport
from quickcheck.services.settings_service import get_or_create_notification_settings

logger = logging.getLogger(__name__)
settings = get_settings()

GUEST_NAME_TOKEN = "{{GUEST_NAME}}"
REVIEW_LINK_TOKEN = "{{REVIEW_LINK}}"


def build_review_link(visit_id: str) -> str:
    return f"{settings.REVIEW_LINK_BASE_URL.rstrip('/')}/{visit_id}"


def render_review_message(template: str, guest_name: str, review_link: str) -> str:
    # Only the first occurrence of each token is substituted.
    return template.replace(GUEST_NAME_TOKEN, guest_name, 1).replace(REVIEW_LINK_TOKEN, review_link, 1)


def send_review_request(
    store: Store,
    visit_id: str,
    transport: NotificationTransport | None = None,
    now: datetime | None = None,
) -> Visit:
    visit = store.get(Visit, visit_id)
    if not visit:
        raise NotFoundError("Visit not found")
    if visit.review_request_sent:
        raise ConflictError("Review request already sent for this visit")
    guest = store.get(Guest, visit.guest_id)
    if not guest:
        raise NotFoundError("Guest not found for visit")

    channel = ReviewChannel.email if guest.email else ReviewChannel.sms
    notification_settings = get_or_create_notification_settings(store)
    template = (
        notification_settings.email_template
        if channel == ReviewChannel.email
        else notification_settings.sms_template
    )
    message = render_review_message(template, guest.name, build_review_link(visit.id))

    claimed = store.update_where(
        Visit,
        (Visit.id == visit.id, Visit.review_request_sent.is_(False)),
        {"review_request_sent": True},
    )
    if not claimed:
        raise ConflictError("Review request already sent for this visit")

    store.insert(
        ReviewRequest(
            visit_id=visit.id,
            guest_name=guest.name,
            channel=channel,
            sent_at=now or datetime.utcnow(),
        )
    )
    recipient = guest.email if channel == ReviewChannel.email else guest.phone
    (transport or get_transport()).send(channel.value, recipient, message)
    logger.info("review_request.sent visit_id=%s channel=%s", visit.id, channel.value)
    return store.refresh(visit)


def list_review_requests(store: Store) -> list[ReviewRequest]:
    return store.find(ReviewRequest, order_by=(ReviewRequest.sent_at.desc(),))


def create_review(store: Store, visit_id: str, rating: int, comment: str = "") -> Review:
    if not store.get(Visit, visit_id):
        raise NotFoundError("Visit not found")
    if rating < 1 or rating > 5:
        raise ValidationError("Rating must be between 1 and 5")
    review = store.insert(Review(visit_id=visit_id, rating=rating, comment=(comment or "").strip()))
    logger.info("review.created visit_id=%s rating=%s", visit_id, rating)
    return review
