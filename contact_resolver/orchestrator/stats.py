"""Counters collected while the waterfall runs."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from ..config import LlmPricing

LOGGER = logging.getLogger(__name__)


@dataclass
class StageStats:
    attempted: int = 0
    found: int = 0
    skipped: int = 0
    errors: int = 0


@dataclass
class RunStats:
    """Per-stage outcomes plus paid usage for one batch."""

    pricing: LlmPricing = field(default_factory=LlmPricing)
    businesses: int = 0
    stages: Dict[str, StageStats] = field(default_factory=dict)
    verification_calls: int = 0
    finder_credits: int = 0
    llm_input_tokens: int = 0
    llm_output_tokens: int = 0

    def stage(self, name: str) -> StageStats:
        return self.stages.setdefault(name, StageStats())

    def add_llm_tokens(self, input_tokens: int, output_tokens: int) -> None:
        self.llm_input_tokens += max(0, int(input_tokens or 0))
        self.llm_output_tokens += max(0, int(output_tokens or 0))

    @property
    def llm_cost(self) -> float:
        return self.pricing.cost(self.llm_input_tokens, self.llm_output_tokens)

    def log_summary(self, logger: logging.Logger = LOGGER) -> None:
        logger.info("Processed %s businesses", self.businesses)
        for name, stats in self.stages.items():
            logger.info(
                "  %-14s attempted=%s found=%s skipped=%s errors=%s",
                name,
                stats.attempted,
                stats.found,
                stats.skipped,
                stats.errors,
            )
        logger.info("  verification calls: %s, finder credits: %s", self.verification_calls, self.finder_credits)
        if self.llm_input_tokens or self.llm_output_tokens:
            logger.info(
                "  LLM tokens: %s in / %s out (~$%.4f)",
                self.llm_input_tokens,
                self.llm_output_tokens,
                self.llm_cost,
            )
