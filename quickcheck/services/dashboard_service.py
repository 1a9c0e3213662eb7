import math
from datetime import datetime, time, timedelta

import pytz

from quickcheck.core.config import get_settings
from quickcheck.db.store import Store
from quickcheck.schemas.visit import VisitDetail
from quickcheck.services.visit_service import list_visit_log

settings = get_settings()

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
TREND_WINDOW_DAYS = 7
NO_HOST = "N/A"


def _local(ts: datetime, tz) -> datetime:
    return pytz.utc.localize(ts).astimezone(tz)


def count_returning_guests(visits: list[VisitDetail]) -> int:
    visits_by_guest: dict[str, int] = {}
    for visit in visits:
        visits_by_guest[visit.guest_id] = visits_by_guest.get(visit.guest_id, 0) + 1
    return len([count for count in visits_by_guest.values() if count > 1])


def top_host(visits: list[VisitDetail]) -> str:
    """Busiest host; on a tie the host seen first in ``visits`` wins."""
    visits_by_host: dict[str, int] = {}
    for visit in visits:
        visits_by_host[visit.host] = visits_by_host.get(visit.host, 0) + 1

    best, best_count = NO_HOST, 0
    for host, count in visits_by_host.items():
        if count > best_count:
            best, best_count = host, count
    return best


def weekly_trend(visits: list[VisitDetail], now: datetime, tz) -> list[dict]:
    local_now = _local(now, tz)
    buckets: dict[str, int] = {}
    for days_back in range(TREND_WINDOW_DAYS - 1, -1, -1):
        buckets[WEEKDAY_NAMES[(local_now - timedelta(days=days_back)).weekday()]] = 0

    # Buckets are keyed by weekday name, so a visit exactly seven days old
    # counts towards today's bar.
    for visit in visits:
        diff_days = math.ceil((now - visit.check_in_ts).total_seconds() / 86400)
        if diff_days <= TREND_WINDOW_DAYS:
            key = WEEKDAY_NAMES[_local(visit.check_in_ts, tz).weekday()]
            if key in buckets:
                buckets[key] += 1

    return [{"name": name, "visitors": count} for name, count in buckets.items()]


def get_dashboard_overview(store: Store, now: datetime | None = None) -> dict:
    now = now or datetime.utcnow()
    tz = pytz.timezone(settings.TIMEZONE)
    local_now = _local(now, tz)
    midnight = tz.localize(datetime.combine(local_now.date(), time.min))

    visits = list_visit_log(store)
    today_visits = [v for v in visits if _local(v.check_in_ts, tz) >= midnight]

    return {
        "today": len(today_visits),
        "returning": count_returning_guests(visits),
        "topHost": top_host(today_visits),
        "weekly": weekly_trend(visits, now, tz),
    }
