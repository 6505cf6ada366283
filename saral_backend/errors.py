"""Exception types shared by the Saral Loan backend."""


class SaralError(Exception):
    """Base class for all Saral Loan errors."""


class InvalidInputError(SaralError, ValueError):
    """A caller passed a malformed application or form payload."""


class StorageUnavailableError(SaralError):
    """The persistence medium could not be read or written."""
