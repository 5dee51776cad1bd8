"""Sex encodings for pedigree records."""

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Sex(Enum):
    """Canonical biological sex of an individual."""
    MALE = "Male"
    FEMALE = "Female"
    UNKNOWN = "Unknown"  # Legitimate value, not an error marker


# Raw encodings seen in PED files and UI payloads
UNKNOWN_CODES = (0, -1, "0", None)
MALE_CODES = (1, "1", "Male")
FEMALE_CODES = (2, "2", "Female")


def normalize_sex(raw: Any) -> Any:
    """Map a raw sex code onto the canonical Sex values.

    Recognized encodings:
        0, -1, "0", None  -> Sex.UNKNOWN
        1, "1", "Male"    -> Sex.MALE
        2, "2", "Female"  -> Sex.FEMALE

    Any other value is returned unchanged. Such a value never counts as
    male or female, so a parent carrying it fails the sex/role check.

    Args:
        raw: Sex value as supplied by the caller

    Returns:
        A Sex member, or the raw value if it is not a recognized encoding
    """
    if isinstance(raw, Sex):
        return raw

    # True == 1 in Python, but a boolean is not a sex code
    if isinstance(raw, bool):
        logger.debug(f"Passing through unrecognized sex code {raw!r}")
        return raw

    if raw in UNKNOWN_CODES:
        return Sex.UNKNOWN
    if raw in MALE_CODES:
        return Sex.MALE
    if raw in FEMALE_CODES:
        return Sex.FEMALE

    logger.debug(f"Passing through unrecognized sex code {raw!r}")
    return raw
