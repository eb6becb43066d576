class InvalidRequestError(ValueError):
    """Malformed input to the allocation engine or batch builder."""


class BookingNotFoundError(LookupError):
    pass


class ArchiveNotFoundError(LookupError):
    pass


class PersistenceError(RuntimeError):
    """A booking or archive store failed while committing changes."""


class ContractorNotFoundError(LookupError):
    pass
