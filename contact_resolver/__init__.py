"""Contact resolution engine: find the owner and a usable email address for small businesses."""

from .models import (
    BusinessContactState,
    EmailSource,
    NameSource,
    Owner,
    OwnerCandidate,
    QuotaRecord,
    VerificationStatus,
)
from .orchestrator import ContactWaterfall
from .quota import (
    InMemoryQuotaTracker,
    JsonFileQuotaTracker,
    QuotaExceededError,
    QuotaStorageError,
    SqliteQuotaTracker,
)

__version__ = "0.1.0"

__all__ = [
    "BusinessContactState",
    "ContactWaterfall",
    "EmailSource",
    "InMemoryQuotaTracker",
    "JsonFileQuotaTracker",
    "NameSource",
    "Owner",
    "OwnerCandidate",
    "QuotaExceededError",
    "QuotaRecord",
    "QuotaStorageError",
    "SqliteQuotaTracker",
    "VerificationStatus",
]
