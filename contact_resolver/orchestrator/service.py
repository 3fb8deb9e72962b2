"""Discovery waterfall that drives contact records through the ordered stages."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Protocol, Sequence, Set

from ..config import ConfigurationError, EngineSettings
from ..emails.verification import apply_verification_error, apply_verification_result
from ..models import (
    BusinessContactState,
    FinderResult,
    LlmExtraction,
    SiteExtraction,
    VerificationResult,
    VerificationStatus,
)
from ..quota import QuotaStorageError, QuotaTracker, is_quota_signal
from .stages import STAGE_NAMES, Stage, default_stages
from .stats import RunStats
from .timeouts import StageTimeoutError, call_with_timeout

LOGGER = logging.getLogger(__name__)

_ERROR_MESSAGE_LIMIT = 120


class SiteExtractorProtocol(Protocol):
    def scrape_website(self, url: str) -> SiteExtraction:  # pragma: no cover - runtime protocol
        """Return owner names and addresses found in the site's text and mailto links."""


class OwnerExtractorProtocol(Protocol):
    def extract_owners_from_website(
        self, business_name: str, url: str
    ) -> Optional[LlmExtraction]:  # pragma: no cover - runtime protocol
        """Return owners and classified addresses read by a language model, or ``None``."""


class VerifierProtocol(Protocol):
    def verify_email(self, email: str, mode: str = "power") -> VerificationResult:  # pragma: no cover
        """Check whether a mailbox exists."""


class FinderProtocol(Protocol):
    def find_email(
        self, first_name: str, last_name: str, domain_or_company: str
    ) -> FinderResult:  # pragma: no cover - runtime protocol
        """Look up addresses for a person at a company."""


class ContactWaterfall:
    """Runs the discovery stages for each business and applies the upgrade policy.

    Businesses are processed one at a time and stages strictly in order. A
    failing stage is logged and treated as "no candidate"; a quota signal from a
    paid service stops that service for the rest of the batch.
    """

    def __init__(
        self,
        *,
        quota: QuotaTracker,
        site_extractor: Optional[SiteExtractorProtocol] = None,
        owner_extractor: Optional[OwnerExtractorProtocol] = None,
        verifier: Optional[VerifierProtocol] = None,
        finder: Optional[FinderProtocol] = None,
        settings: Optional[EngineSettings] = None,
        stages: Optional[Sequence[Stage]] = None,
        enabled_stages: Optional[Iterable[str]] = None,
    ) -> None:
        self.quota = quota
        self.site_extractor = site_extractor
        self.owner_extractor = owner_extractor
        self.verifier = verifier
        self.finder = finder
        self.settings = settings or EngineSettings()
        self.stages: List[Stage] = list(
            stages
            if stages is not None
            else default_stages(self.settings.verifier_service, self.settings.finder_service)
        )
        if enabled_stages is None:
            self.enabled_stages = {stage.name for stage in self.stages}
        else:
            self.enabled_stages = set(enabled_stages)
            unknown = self.enabled_stages - {stage.name for stage in self.stages}
            if unknown:
                raise ConfigurationError(
                    f"Unknown stage(s): {', '.join(sorted(unknown))}. Known stages: {', '.join(STAGE_NAMES)}"
                )
        self.stats = RunStats(pricing=self.settings.llm_pricing)
        self._exhausted: Set[str] = set()
        self._planning = False

    # --- quota bookkeeping ---

    @property
    def exhausted_services(self) -> Set[str]:
        return set(self._exhausted)

    def is_exhausted(self, service: Optional[str]) -> bool:
        return service is not None and service in self._exhausted

    def mark_exhausted(self, service: str, reason: Optional[BaseException] = None) -> None:
        if service not in self._exhausted:
            LOGGER.warning(
                "%s daily limit reached, skipping it for the rest of this batch%s",
                service,
                f" ({str(reason)[:_ERROR_MESSAGE_LIMIT]})" if reason else "",
            )
        self._exhausted.add(service)

    def has_quota(self, service: str) -> bool:
        if self.is_exhausted(service):
            return False
        status = self.quota.check_daily_limit(service)
        if not status.can_use:
            if not self._planning:
                self.mark_exhausted(service)
            return False
        return True

    # --- external calls ---

    def call(self, kind: str, func: Callable[..., Any], *args, **kwargs) -> Any:
        timeout = getattr(self.settings.timeouts, kind, None)
        return call_with_timeout(func, timeout, *args, **kwargs)

    def call_paid(self, kind: str, service: str, func: Callable[..., Any], *args, count: int = 1, **kwargs) -> Any:
        """Like :meth:`call`, recording ``count`` units of ``service`` usage.

        Usage is recorded on success and also on timeout, since the abandoned
        request may still complete and be billed.
        """

        try:
            result = self.call(kind, func, *args, **kwargs)
        except StageTimeoutError:
            self.quota.record_usage(service, count)
            raise
        self.quota.record_usage(service, count)
        return result

    # --- running ---

    def run(self, state: BusinessContactState) -> BusinessContactState:
        """Refine ``state`` in place through every enabled stage and return it."""

        self.stats.businesses += 1
        for stage in self.stages:
            if stage.name not in self.enabled_stages:
                continue
            stage_stats = self.stats.stage(stage.name)
            if not stage.trigger(self, state):
                stage_stats.skipped += 1
                continue

            stage_stats.attempted += 1
            LOGGER.debug("Running %s stage for %s", stage.name, state.display_name())
            try:
                candidate = stage.execute(self, state)
            except (QuotaStorageError, ConfigurationError):
                raise
            except Exception as exc:
                if stage.service and is_quota_signal(exc):
                    self.mark_exhausted(stage.service, exc)
                else:
                    stage_stats.errors += 1
                    LOGGER.warning(
                        "%s: %s stage failed: %s",
                        state.display_name(),
                        stage.name,
                        str(exc)[:_ERROR_MESSAGE_LIMIT],
                    )
                continue

            if candidate is not None and stage.accept(state, candidate):
                stage_stats.found += 1
        return state

    def run_batch(self, states: Iterable[BusinessContactState]) -> List[BusinessContactState]:
        """Run every record in order; quota stops and statistics are scoped to this batch."""

        self._exhausted = set()
        self.stats = RunStats(pricing=self.settings.llm_pricing)
        results = [self.run(state) for state in states]
        self.stats.log_summary()
        return results

    def plan(self, state: BusinessContactState) -> List[str]:
        """Return the stages whose triggers currently hold, without any external call.

        Quota is read but a spent service is not marked exhausted.
        """

        self._planning = True
        try:
            return [
                stage.name
                for stage in self.stages
                if stage.name in self.enabled_stages and stage.trigger(self, state)
            ]
        finally:
            self._planning = False

    def verify_current_email(self, state: BusinessContactState) -> VerificationStatus:
        """Re-check the record's current address unless it is already known to be valid."""

        if not state.email or state.email_verification_status is VerificationStatus.VALID:
            return state.email_verification_status
        if self.verifier is None:
            raise ConfigurationError("Re-verification requires a configured verifier")

        service = self.settings.verifier_service
        if not self.has_quota(service):
            return state.email_verification_status

        try:
            result = self.call_paid("verify", service, self.verifier.verify_email, state.email)
        except QuotaStorageError:
            raise
        except Exception as exc:
            if is_quota_signal(exc):
                self.mark_exhausted(service, exc)
            else:
                apply_verification_error(state, exc)
            return state.email_verification_status

        self.stats.verification_calls += 1
        return apply_verification_result(state, result)
