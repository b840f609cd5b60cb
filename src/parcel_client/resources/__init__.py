"""Resource model objects and their collection operations."""

from parcel_client.resources.app import App
from parcel_client.resources.base import Page, Resource
from parcel_client.resources.client import Client
from parcel_client.resources.consent import Consent
from parcel_client.resources.dataset import Dataset, Download, Upload
from parcel_client.resources.grant import Grant
from parcel_client.resources.identity import Identity
from parcel_client.resources.job import Job

__all__ = [
    "App",
    "Client",
    "Consent",
    "Dataset",
    "Download",
    "Grant",
    "Identity",
    "Job",
    "Page",
    "Resource",
    "Upload",
]
