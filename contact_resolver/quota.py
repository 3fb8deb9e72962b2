"""Daily usage counters for paid services.

Counters reset lazily: a record whose stored UTC date is not today is treated
as zero usage the next time it is read. Reads fail open (a missing or corrupt
store counts as "nothing used yet"), writes fail closed and raise
:class:`QuotaStorageError` because an under-count can overspend a paid quota.
"""
from __future__ import annotations

import json
import logging
import os
import sqlite3
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Protocol

from .models import QuotaRecord, QuotaStatus, QuotaUsage

LOGGER = logging.getLogger(__name__)

DEFAULT_DAILY_LIMIT = 500
QUOTA_MESSAGE_MARKERS = ("daily limit", "quota exceeded")


class QuotaExceededError(RuntimeError):
    """Raised when a paid service reports, or the tracker decides, that today's budget is spent."""

    def __init__(self, service: str, message: Optional[str] = None) -> None:
        self.service = service
        super().__init__(message or f"Daily limit reached for {service}")


class QuotaStorageError(RuntimeError):
    """Raised when usage counters cannot be persisted."""


def is_quota_signal(error: BaseException) -> bool:
    """Return ``True`` when ``error`` means a service's daily quota is exhausted."""

    if isinstance(error, QuotaExceededError):
        return True
    message = str(error).lower()
    return any(marker in message for marker in QUOTA_MESSAGE_MARKERS)


def utc_today() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


class QuotaTracker(Protocol):
    """Interface the waterfall uses to budget paid calls."""

    def check_daily_limit(self, service: str) -> QuotaStatus:  # pragma: no cover - protocol
        ...

    def record_usage(self, service: str, count: int = 1) -> QuotaUsage:  # pragma: no cover - protocol
        ...


def _status(record: QuotaRecord) -> QuotaStatus:
    remaining = max(0, record.limit - record.used)
    return QuotaStatus(
        service=record.service,
        can_use=remaining > 0,
        remaining=remaining,
        used=record.used,
        limit=record.limit,
    )


def _usage(record: QuotaRecord) -> QuotaUsage:
    return QuotaUsage(
        service=record.service,
        used=record.used,
        remaining=max(0, record.limit - record.used),
        limit=record.limit,
    )


class _RecordQuotaTracker:
    """Shared lazy-reset logic for trackers that load and save whole records."""

    def __init__(
        self,
        limits: Optional[Mapping[str, int]] = None,
        *,
        default_limit: int = DEFAULT_DAILY_LIMIT,
        today: Callable[[], str] = utc_today,
    ) -> None:
        self._limits: Dict[str, int] = {name.lower(): int(value) for name, value in (limits or {}).items()}
        self._default_limit = int(default_limit)
        self._today = today
        self._lock = threading.Lock()

    def limit_for(self, service: str) -> int:
        return self._limits.get(service.lower(), self._default_limit)

    def _load(self, service: str) -> Optional[QuotaRecord]:
        raise NotImplementedError

    def _save(self, record: QuotaRecord) -> None:
        raise NotImplementedError

    def _current(self, service: str) -> QuotaRecord:
        today = self._today()
        record = self._load(service)
        if record is None:
            return QuotaRecord(service=service, utc_date=today, used=0, limit=self.limit_for(service))
        if record.utc_date != today:
            LOGGER.info("Resetting %s usage for %s (was %s/%s on %s)", service, today, record.used, record.limit, record.utc_date)
            record = QuotaRecord(service=service, utc_date=today, used=0, limit=self.limit_for(service))
            self._save(record)
        return record

    def check_daily_limit(self, service: str) -> QuotaStatus:
        with self._lock:
            return _status(self._current(service))

    def record_usage(self, service: str, count: int = 1) -> QuotaUsage:
        if count < 0:
            raise ValueError("count must not be negative")
        with self._lock:
            record = self._current(service)
            record.used = min(record.limit, record.used + count)
            self._save(record)
            usage = _usage(record)
        LOGGER.debug("%s usage: %s/%s", service, usage.used, usage.limit)
        return usage


class InMemoryQuotaTracker(_RecordQuotaTracker):
    """Tracker kept in process memory, for tests and dry runs."""

    def __init__(self, limits: Optional[Mapping[str, int]] = None, **kwargs) -> None:
        super().__init__(limits, **kwargs)
        self.records: Dict[str, QuotaRecord] = {}

    def _load(self, service: str) -> Optional[QuotaRecord]:
        record = self.records.get(service)
        if record is None:
            return None
        return QuotaRecord(record.service, record.utc_date, record.used, record.limit)

    def _save(self, record: QuotaRecord) -> None:
        self.records[record.service] = QuotaRecord(record.service, record.utc_date, record.used, record.limit)


class JsonFileQuotaTracker(_RecordQuotaTracker):
    """Counters persisted to a single JSON file keyed by service name.

    The file looks like ``{"reoon": {"date": "2024-05-01", "used": 12, "limit": 500}}``.
    """

    def __init__(self, path: str | Path, limits: Optional[Mapping[str, int]] = None, **kwargs) -> None:
        super().__init__(limits, **kwargs)
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not read usage file %s, assuming no usage today: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Usage file %s is not a JSON object, assuming no usage today", self.path)
            return {}
        return data

    def _load(self, service: str) -> Optional[QuotaRecord]:
        entry = self._read_all().get(service)
        if not isinstance(entry, dict):
            return None
        try:
            return QuotaRecord(
                service=service,
                utc_date=str(entry["date"]),
                used=int(entry.get("used", 0)),
                limit=self.limit_for(service),
            )
        except (KeyError, TypeError, ValueError):
            LOGGER.warning("Ignoring malformed %s entry in %s", service, self.path)
            return None

    def _save(self, record: QuotaRecord) -> None:
        data = self._read_all()
        data[record.service] = {"date": record.utc_date, "used": record.used, "limit": record.limit}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".usage-", suffix=".json")
            try:
                with os.fdopen(handle, "w", encoding="utf-8") as stream:
                    json.dump(data, stream, indent=2, sort_keys=True)
                os.chmod(temp_name, 0o600)
                os.replace(temp_name, self.path)
            except BaseException:
                if os.path.exists(temp_name):
                    os.unlink(temp_name)
                raise
        except OSError as exc:
            raise QuotaStorageError(f"Could not write usage file '{self.path}': {exc}") from exc


class SqliteQuotaTracker:
    """Counters in an SQLite table with an atomic compare-and-increment.

    Safe to share between threads or processes. :meth:`try_consume` never lets
    ``used`` pass ``limit``.
    """

    _SCHEMA = (
        "CREATE TABLE IF NOT EXISTS quota_usage ("
        " service TEXT PRIMARY KEY,"
        " utc_date TEXT NOT NULL,"
        " used INTEGER NOT NULL DEFAULT 0,"
        " daily_limit INTEGER NOT NULL)"
    )

    def __init__(
        self,
        path: str | Path,
        limits: Optional[Mapping[str, int]] = None,
        *,
        default_limit: int = DEFAULT_DAILY_LIMIT,
        today: Callable[[], str] = utc_today,
    ) -> None:
        self.path = str(Path(path).expanduser()) if str(path) != ":memory:" else ":memory:"
        self._limits: Dict[str, int] = {name.lower(): int(value) for name, value in (limits or {}).items()}
        self._default_limit = int(default_limit)
        self._today = today
        self._lock = threading.Lock()
        try:
            if self.path != ":memory:":
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(self.path, check_same_thread=False, isolation_level=None)
            self._connection.execute(self._SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise QuotaStorageError(f"Could not open usage database '{self.path}': {exc}") from exc

    def limit_for(self, service: str) -> int:
        return self._limits.get(service.lower(), self._default_limit)

    def close(self) -> None:
        self._connection.close()

    def _ensure_today(self, service: str) -> None:
        today = self._today()
        limit = self.limit_for(service)
        self._connection.execute(
            "INSERT INTO quota_usage (service, utc_date, used, daily_limit) VALUES (?, ?, 0, ?) "
            "ON CONFLICT(service) DO UPDATE SET "
            " used = CASE WHEN utc_date = excluded.utc_date THEN used ELSE 0 END,"
            " utc_date = excluded.utc_date,"
            " daily_limit = excluded.daily_limit",
            (service, today, limit),
        )

    def _fetch(self, service: str) -> QuotaRecord:
        row = self._connection.execute(
            "SELECT utc_date, used, daily_limit FROM quota_usage WHERE service = ?", (service,)
        ).fetchone()
        if row is None:
            return QuotaRecord(service, self._today(), 0, self.limit_for(service))
        return QuotaRecord(service, row[0], int(row[1]), int(row[2]))

    def check_daily_limit(self, service: str) -> QuotaStatus:
        with self._lock:
            try:
                self._ensure_today(service)
                return _status(self._fetch(service))
            except sqlite3.Error as exc:
                LOGGER.warning("Could not read usage for %s, assuming no usage today: %s", service, exc)
                return _status(QuotaRecord(service, self._today(), 0, self.limit_for(service)))

    def try_consume(self, service: str, count: int = 1) -> bool:
        """Atomically reserve ``count`` units; ``False`` when that would pass the limit."""

        with self._lock:
            try:
                self._ensure_today(service)
                cursor = self._connection.execute(
                    "UPDATE quota_usage SET used = used + ? WHERE service = ? AND used + ? <= daily_limit",
                    (count, service, count),
                )
            except sqlite3.Error as exc:
                raise QuotaStorageError(f"Could not update usage for {service}: {exc}") from exc
            return cursor.rowcount == 1

    def record_usage(self, service: str, count: int = 1) -> QuotaUsage:
        if count < 0:
            raise ValueError("count must not be negative")
        with self._lock:
            try:
                self._ensure_today(service)
                self._connection.execute(
                    "UPDATE quota_usage SET used = MIN(daily_limit, used + ?) WHERE service = ?",
                    (count, service),
                )
                return _usage(self._fetch(service))
            except sqlite3.Error as exc:
                raise QuotaStorageError(f"Could not update usage for {service}: {exc}") from exc
