"""
Retry-After header interpretation.

The header carries either a number of seconds or an HTTP-date
(see https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Retry-After).
"""

import logging
import re
import time
from datetime import datetime, timezone

from .config import DATE_FORMAT

logger = logging.getLogger(__name__)

# Plain decimal only: no exponents, no inf/nan
_SECONDS_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")


def parse_retry_after(value: str, date_format: str = DATE_FORMAT) -> float | None:
    """
    Derive a delay from a Retry-After header value.

    Args:
        value: Raw header value
        date_format: strptime format used when the value is a date

    Returns:
        Seconds to wait (negative for a date in the past), or None when the
        value is neither a number nor a date in the given format
    """
    if not isinstance(value, str):
        return None

    value = value.strip()
    if _SECONDS_RE.match(value):
        return abs(float(value))

    try:
        parsed = datetime.strptime(value, date_format)
    except ValueError:
        logger.debug(f"Ignoring unparseable Retry-After value: {value!r}")
        return None

    # strptime drops named zones like GMT; HTTP-dates are always UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed.timestamp() - time.time()
