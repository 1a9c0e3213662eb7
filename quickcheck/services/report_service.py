import csv
import io
from datetime import datetime

import pytz

from quickcheck.core.config import get_settings
from quickcheck.db.store import Store
from quickcheck.services.visit_service import list_visit_log

settings = get_settings()

VISIT_LOG_COLUMNS = [
    "Visitor Name",
    "ID Number",
    "Check-in Time",
    "Check-out Time",
    "Host",
    "Reason",
    "Checked In By",
    "Review Request Sent",
]
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _local_time(ts: datetime, tz) -> str:
    return pytz.utc.localize(ts).astimezone(tz).strftime(TIME_FORMAT)


def export_visit_log_csv(store: Store) -> str:
    """The full visit log as CSV, newest check-in first, times in the configured timezone."""
    tz = pytz.timezone(settings.TIMEZONE)
    mem = io.StringIO()
    writer = csv.writer(mem, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(VISIT_LOG_COLUMNS)
    for visit in list_visit_log(store):
        writer.writerow(
            [
                visit.guest.name if visit.guest else "",
                visit.guest.id_number if visit.guest else "",
                _local_time(visit.check_in_ts, tz),
                _local_time(visit.check_out_ts, tz) if visit.check_out_ts else "Active",
                visit.host,
                visit.reason,
                visit.checked_in_by_user.name if visit.checked_in_by_user else "",
                "Yes" if visit.review_request_sent else "No",
            ]
        )
    return mem.getvalue()
