"""Python client for the Parcel confidential data-exchange REST API."""

from parcel_client.client.errors import (
    ContractViolationError,
    NotFoundError,
    ParcelError,
    RequestError,
)
from parcel_client.parcel import Parcel

__version__ = "0.1.0"

__all__ = [
    "ContractViolationError",
    "NotFoundError",
    "Parcel",
    "ParcelError",
    "RequestError",
    "__version__",
]
