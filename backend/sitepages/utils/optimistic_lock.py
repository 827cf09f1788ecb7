from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import parse, ParserError

from sitepages.domain.exceptions import Conflict, PreconditionInvalid


@dataclass(frozen=True)
class Precondition:
    """Write precondition sent by the client: a revision, a timestamp, or neither."""
    revision: Optional[int] = None
    unmodified_since: Optional[datetime] = None


NO_PRECONDITION = Precondition()


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def _parse_etag(value):
    tag = value.strip()
    if tag.startswith("W/"):
        tag = tag[2:]
    tag = tag.strip('"')
    try:
        return int(tag)
    except ValueError:
        raise PreconditionInvalid("Invalid If-Match header")


def read_precondition(headers) -> Precondition:
    """Build a Precondition from If-Match / If-Unmodified-Since headers."""
    revision = None
    unmodified_since = None

    if_match = headers.get("If-Match")
    if if_match and if_match.strip() != "*":
        revision = _parse_etag(if_match)

    client_ts = headers.get("If-Unmodified-Since")
    if client_ts:
        try:
            unmodified_since = normalize_ts(parse(client_ts))
        except (ParserError, OverflowError, ValueError):
            raise PreconditionInvalid("Invalid If-Unmodified-Since header")

    return Precondition(revision=revision, unmodified_since=unmodified_since)


def enforce_optimistic_lock(page, precondition: Optional[Precondition]):
    """
    Raises Conflict if the page changed since the client last read it.
    """
    if precondition is None:
        return  # No optimistic lock requested

    if precondition.revision is not None and page.revision != precondition.revision:
        raise Conflict(
            f"Conflict detected. Page is at revision {page.revision}, "
            f"request was based on {precondition.revision}."
        )

    if precondition.unmodified_since is not None:
        # HTTP dates carry whole seconds only
        server_ts = normalize_ts(page.updated_at).replace(microsecond=0)
        if server_ts > precondition.unmodified_since:
            raise Conflict()
