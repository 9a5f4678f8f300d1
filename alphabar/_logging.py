import hashlib
import logging
from typing import Any

# Create the library logger
logger = logging.getLogger("alphabar")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_value(value: Any) -> str:
    """
    Redacts caller-supplied values that are not valid groups (e.g. junk from a query string)
    for logging. Hashes the value to allow correlation without echoing raw input.
    """
    if value is None:
        return "<none>"
    try:
        return hashlib.sha256(str(value).encode("utf-8")).hexdigest()[:8]
    except Exception:
        return "<redaction_failed>"
