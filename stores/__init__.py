from stores.booking_store import ArchiveStore, BookingStore, ContractorStore
from stores.memory_store import InMemoryArchiveStore, InMemoryBookingStore, InMemoryContractorStore

__all__ = [
    "ArchiveStore",
    "BookingStore",
    "ContractorStore",
    "InMemoryArchiveStore",
    "InMemoryBookingStore",
    "InMemoryContractorStore",
]
