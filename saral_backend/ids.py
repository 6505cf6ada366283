"""Identifier generation for stored records."""

import string
import uuid

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(length: int = 9) -> str:
    """Return a random base-36 token of the given length.

    The token is drawn from a UUID4, so ids need no coordination between
    devices and collisions are negligible at single-device record counts.
    """
    value = uuid.uuid4().int
    chars = []
    while value and len(chars) < length:
        value, rem = divmod(value, 36)
        chars.append(_ALPHABET[rem])
    return "".join(chars).rjust(length, "0")
