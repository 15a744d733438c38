"""ID and value generators (document ids, report protocols)."""

import secrets
import string

from cuid2 import cuid_wrapper

from app.shared.utils.datetime import utc_now

cuid_generator = cuid_wrapper()

PROTOCOL_ALPHABET = string.ascii_uppercase + string.digits
PROTOCOL_SUFFIX_LENGTH = 6


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Used as Firestore document id for every created entity.

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_protocol() -> str:
    """Return a report protocol like 20240501-7K2Q9B (UTC date + random suffix)."""
    suffix = "".join(
        secrets.choice(PROTOCOL_ALPHABET) for _ in range(PROTOCOL_SUFFIX_LENGTH)
    )
    return f"{utc_now():%Y%m%d}-{suffix}"
