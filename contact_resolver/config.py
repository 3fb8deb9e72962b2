"""Configuration helpers for the contact resolution engine."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

LOGGER = logging.getLogger(__name__)

COLLABORATOR_ROLES = ("site_extractor", "owner_extractor", "verifier", "finder")
DEFAULT_USAGE_PATH = "~/.contact_resolver/usage.json"


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise ConfigurationError(f"Configuration file '{file_path}' is not valid JSON: {exc}") from exc
    else:
        import yaml

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Configuration file '{file_path}' is not valid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping at the top level")
    return data


@dataclass
class StageTimeouts:
    """Per-call ceilings, in seconds, for each kind of external call."""

    site: float = 60.0
    llm: float = 30.0
    verify: float = 30.0
    finder: float = 90.0


@dataclass
class LlmPricing:
    """USD per million tokens, used only to report cost."""

    input_per_million: float = 0.80
    output_per_million: float = 4.00

    def cost(self, input_tokens: int, output_tokens: int) -> float:
        return (input_tokens / 1_000_000) * self.input_per_million + (
            output_tokens / 1_000_000
        ) * self.output_per_million


@dataclass
class EngineSettings:
    pattern_checks_per_business: int = 7
    verify_finder_results: bool = True
    upgrade_generic_with_paid_stages: bool = False
    verifier_service: str = "reoon"
    finder_service: str = "icypeas"
    finder_credits_per_search: int = 1
    timeouts: StageTimeouts = field(default_factory=StageTimeouts)
    llm_pricing: LlmPricing = field(default_factory=LlmPricing)


def _section(config: Mapping[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Configuration section '{name}' must be a mapping")
    return section


def _number(section: Mapping[str, Any], key: str, default: float, *, cast=float):
    value = section.get(key, default)
    try:
        return cast(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Configuration value '{key}' must be a number, got {value!r}") from exc


def settings_from_config(config: Mapping[str, Any]) -> EngineSettings:
    """Build :class:`EngineSettings` from the ``waterfall`` section, applying defaults."""

    section = _section(config, "waterfall")
    defaults = EngineSettings()

    timeouts_cfg = _section(section, "timeouts")
    timeouts = StageTimeouts(
        site=_number(timeouts_cfg, "site", defaults.timeouts.site),
        llm=_number(timeouts_cfg, "llm", defaults.timeouts.llm),
        verify=_number(timeouts_cfg, "verify", defaults.timeouts.verify),
        finder=_number(timeouts_cfg, "finder", defaults.timeouts.finder),
    )
    pricing_cfg = _section(section, "llm_pricing")
    pricing = LlmPricing(
        input_per_million=_number(pricing_cfg, "input_per_million", defaults.llm_pricing.input_per_million),
        output_per_million=_number(pricing_cfg, "output_per_million", defaults.llm_pricing.output_per_million),
    )

    checks = _number(section, "pattern_checks_per_business", defaults.pattern_checks_per_business, cast=int)
    if checks < 0:
        raise ConfigurationError("'pattern_checks_per_business' must not be negative")

    return EngineSettings(
        pattern_checks_per_business=checks,
        verify_finder_results=bool(section.get("verify_finder_results", defaults.verify_finder_results)),
        upgrade_generic_with_paid_stages=bool(
            section.get("upgrade_generic_with_paid_stages", defaults.upgrade_generic_with_paid_stages)
        ),
        verifier_service=str(section.get("verifier_service", defaults.verifier_service)),
        finder_service=str(section.get("finder_service", defaults.finder_service)),
        finder_credits_per_search=_number(
            section, "finder_credits_per_search", defaults.finder_credits_per_search, cast=int
        ),
        timeouts=timeouts,
        llm_pricing=pricing,
    )


def quota_settings(config: Mapping[str, Any]) -> Tuple[str, str, int, Dict[str, int]]:
    """Return ``(backend, path, default_limit, limits)`` from the ``quota`` section."""

    section = _section(config, "quota")
    backend = str(section.get("backend", "json")).lower()
    if backend not in {"json", "sqlite", "memory"}:
        raise ConfigurationError(f"Unknown quota backend '{backend}'. Expected json, sqlite or memory")
    path = str(section.get("path") or DEFAULT_USAGE_PATH)
    default_limit = _number(section, "default_limit", 500, cast=int)
    limits_cfg = _section(section, "limits")
    limits = {str(name): _number(limits_cfg, name, 0, cast=int) for name in limits_cfg}
    return backend, path, default_limit, limits


def iter_enabled_collaborator_configs(config: Mapping[str, Any]) -> Iterable[Tuple[str, Dict[str, Any]]]:
    collaborators = _section(config, "collaborators")
    unknown = sorted(set(collaborators) - set(COLLABORATOR_ROLES))
    if unknown:
        raise ConfigurationError(f"Unknown collaborator role(s): {', '.join(unknown)}")
    for role in COLLABORATOR_ROLES:
        collaborator = collaborators.get(role)
        if not collaborator:
            continue
        if not isinstance(collaborator, dict):
            raise ConfigurationError(f"Collaborator '{role}' must be a mapping")
        if collaborator.get("enabled", True):
            yield role, collaborator
        else:
            LOGGER.debug("Skipping disabled collaborator %s", role)


def resolve_api_key(options: Mapping[str, Any], service: str) -> str:
    """Return the API key from ``options['api_key']`` or the variable named by ``api_key_env``."""

    key: Optional[str] = options.get("api_key")
    if not key and options.get("api_key_env"):
        key = os.environ.get(str(options["api_key_env"]))
    if not key:
        raise ConfigurationError(
            f"No API key configured for {service}: set 'api_key' or 'api_key_env' in its options"
        )
    return key
