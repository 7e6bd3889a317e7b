"""Protocol interfaces for the Specify SDK."""
from .storage import StorageBackend
from .transport import Transport, TransportResponse

__all__ = ["StorageBackend", "Transport", "TransportResponse"]
