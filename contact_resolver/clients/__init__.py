"""Concrete collaborators: paid-service HTTP clients and recorded fixtures."""

from .http import ServiceResponseError
from .icypeas import IcypeasFinder
from .reoon import ReoonVerifier
from .sample import RecordedFinder, RecordedOwnerExtractor, RecordedSiteExtractor, RecordedVerifier

__all__ = [
    "IcypeasFinder",
    "RecordedFinder",
    "RecordedOwnerExtractor",
    "RecordedSiteExtractor",
    "RecordedVerifier",
    "ReoonVerifier",
    "ServiceResponseError",
]
