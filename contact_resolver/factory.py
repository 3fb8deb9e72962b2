"""Factory helpers for constructing the waterfall and its collaborators from configuration."""
from __future__ import annotations

import importlib
from typing import Any, Dict, Iterable, Mapping, Optional

from .config import (
    ConfigurationError,
    iter_enabled_collaborator_configs,
    quota_settings,
    resolve_api_key,
    settings_from_config,
)
from .orchestrator import ContactWaterfall
from .quota import InMemoryQuotaTracker, JsonFileQuotaTracker, QuotaTracker, SqliteQuotaTracker
from .rate_limit import DelayPolicy, RateLimitedClient, RateLimiter


def _load_class(path: str):
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        raise ConfigurationError(f"Invalid collaborator class path '{path}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import module '{module_name}': {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ConfigurationError(f"Module '{module_name}' does not define '{attr}'") from exc


def _resolve_options(role: str, options: Mapping[str, Any]) -> Dict[str, Any]:
    resolved = dict(options)
    if "api_key_env" in resolved:
        resolved["api_key"] = resolve_api_key(resolved, role)
        resolved.pop("api_key_env")
    return resolved


def build_collaborators(config: Mapping[str, Any]) -> Dict[str, RateLimitedClient]:
    """Instantiate the collaborator classes named in the ``collaborators`` section."""

    collaborators: Dict[str, RateLimitedClient] = {}
    for role, collaborator_cfg in iter_enabled_collaborator_configs(config):
        class_path = collaborator_cfg.get("class")
        if not class_path:
            raise ConfigurationError(f"Collaborator '{role}' is missing required 'class' field")

        options = _resolve_options(role, collaborator_cfg.get("options") or {})
        collaborator_cls = _load_class(class_path)
        try:
            instance = collaborator_cls(**options)
        except TypeError as exc:
            raise ConfigurationError(f"Invalid options for collaborator '{role}': {exc}") from exc

        delay_seconds = float(collaborator_cfg.get("delay_seconds", 0) or 0)
        calls_per_minute = collaborator_cfg.get("rate_limit_per_minute")
        rate_limiter = RateLimiter(float(calls_per_minute)) if calls_per_minute else RateLimiter(None)

        collaborators[role] = RateLimitedClient(
            instance,
            display_name=collaborator_cfg.get("name"),
            delay_policy=DelayPolicy(delay_seconds=delay_seconds),
            rate_limiter=rate_limiter,
        )
    return collaborators


def build_quota_tracker(config: Mapping[str, Any]) -> QuotaTracker:
    backend, path, default_limit, limits = quota_settings(config)
    if backend == "memory":
        return InMemoryQuotaTracker(limits, default_limit=default_limit)
    if backend == "sqlite":
        return SqliteQuotaTracker(path, limits, default_limit=default_limit)
    return JsonFileQuotaTracker(path, limits, default_limit=default_limit)


def build_waterfall(
    config: Mapping[str, Any],
    *,
    enabled_stages: Optional[Iterable[str]] = None,
    quota: Optional[QuotaTracker] = None,
) -> ContactWaterfall:
    """Build a :class:`ContactWaterfall` with collaborators, quota tracker and settings from ``config``."""

    collaborators = build_collaborators(config)
    return ContactWaterfall(
        quota=quota if quota is not None else build_quota_tracker(config),
        site_extractor=collaborators.get("site_extractor"),
        owner_extractor=collaborators.get("owner_extractor"),
        verifier=collaborators.get("verifier"),
        finder=collaborators.get("finder"),
        settings=settings_from_config(config),
        enabled_stages=enabled_stages,
    )
