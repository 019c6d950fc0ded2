from datetime import datetime, timezone

from youtrack_api_util.models import Attachment


def retention_cutoff(now: datetime, years: int) -> datetime:
    try:
        return now.replace(year=now.year - years)
    except ValueError:
        # 29 февраля в невисокосном году
        return now.replace(year=now.year - years, month=3, day=1)


def is_old(attachment: Attachment, years: int, now: datetime | None = None) -> bool:
    if now is None:
        now = datetime.now(timezone.utc)
    cutoff = retention_cutoff(now, years)
    return any(ts is not None and ts < cutoff for ts in (attachment.created, attachment.updated))
