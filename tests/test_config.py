import json

import pytest

from contact_resolver.clients import RecordedSiteExtractor, ReoonVerifier
from contact_resolver.config import (
    ConfigurationError,
    load_configuration,
    quota_settings,
    resolve_api_key,
    settings_from_config,
)
from contact_resolver.factory import build_collaborators, build_quota_tracker, build_waterfall
from contact_resolver.quota import InMemoryQuotaTracker, JsonFileQuotaTracker, SqliteQuotaTracker
from contact_resolver.rate_limit import RateLimitedClient


def test_load_yaml_configuration(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "waterfall:\n"
        "  pattern_checks_per_business: 3\n"
        "  timeouts:\n"
        "    site: 10\n",
        encoding="utf-8",
    )

    settings = settings_from_config(load_configuration(path))

    assert settings.pattern_checks_per_business == 3
    assert settings.timeouts.site == 10
    assert settings.timeouts.llm == 30
    assert settings.llm_pricing.input_per_million == pytest.approx(0.80)


def test_load_configuration_errors(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        load_configuration(tmp_path / "missing.yaml")

    ini = tmp_path / "config.ini"
    ini.write_text("[x]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_configuration(ini)

    broken = tmp_path / "config.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_configuration(broken)

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_configuration(listing)


def test_invalid_waterfall_values_rejected() -> None:
    with pytest.raises(ConfigurationError):
        settings_from_config({"waterfall": {"pattern_checks_per_business": "many"}})
    with pytest.raises(ConfigurationError):
        settings_from_config({"waterfall": {"pattern_checks_per_business": -1}})


def test_quota_settings_defaults() -> None:
    backend, path, default_limit, limits = quota_settings({})

    assert backend == "json"
    assert path.endswith("usage.json")
    assert default_limit == 500
    assert limits == {}

    with pytest.raises(ConfigurationError):
        quota_settings({"quota": {"backend": "redis"}})


def test_build_quota_tracker_backends(tmp_path) -> None:
    assert isinstance(build_quota_tracker({"quota": {"backend": "memory"}}), InMemoryQuotaTracker)
    assert isinstance(
        build_quota_tracker({"quota": {"path": str(tmp_path / "usage.json")}}), JsonFileQuotaTracker
    )
    tracker = build_quota_tracker({"quota": {"backend": "sqlite", "path": str(tmp_path / "usage.db")}})
    assert isinstance(tracker, SqliteQuotaTracker)
    tracker.close()


def test_resolve_api_key_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TEST_REOON_KEY", "secret")

    assert resolve_api_key({"api_key_env": "TEST_REOON_KEY"}, "reoon") == "secret"
    assert resolve_api_key({"api_key": "inline"}, "reoon") == "inline"


def test_missing_api_key_is_fatal(monkeypatch) -> None:
    monkeypatch.delenv("MISSING_REOON_KEY", raising=False)

    with pytest.raises(ConfigurationError):
        build_collaborators(
            {
                "collaborators": {
                    "verifier": {
                        "class": "contact_resolver.clients.ReoonVerifier",
                        "options": {"api_key_env": "MISSING_REOON_KEY"},
                    }
                }
            }
        )


def test_build_collaborators_wraps_instances(tmp_path, monkeypatch) -> None:
    fixture = tmp_path / "pages.json"
    fixture.write_text(json.dumps({"https://acme.com": {"emails": ["kate@acme.com"]}}), encoding="utf-8")
    monkeypatch.setenv("TEST_REOON_KEY", "secret")

    collaborators = build_collaborators(
        {
            "collaborators": {
                "site_extractor": {
                    "class": "contact_resolver.clients.RecordedSiteExtractor",
                    "options": {"fixture": str(fixture)},
                    "rate_limit_per_minute": 120,
                },
                "verifier": {
                    "class": "contact_resolver.clients.ReoonVerifier",
                    "name": "Reoon",
                    "options": {"api_key_env": "TEST_REOON_KEY"},
                },
                "finder": {"class": "contact_resolver.clients.IcypeasFinder", "enabled": False},
            }
        }
    )

    assert set(collaborators) == {"site_extractor", "verifier"}
    assert all(isinstance(client, RateLimitedClient) for client in collaborators.values())
    assert isinstance(collaborators["site_extractor"].wrapped, RecordedSiteExtractor)
    assert isinstance(collaborators["verifier"].wrapped, ReoonVerifier)
    assert collaborators["verifier"].wrapped.api_key == "secret"
    assert collaborators["verifier"].name == "Reoon"


@pytest.mark.parametrize(
    "collaborators",
    [
        {"verifier": {"options": {}}},
        {"verifier": {"class": "NoModulePath"}},
        {"verifier": {"class": "contact_resolver.clients.DoesNotExist"}},
        {"verifier": {"class": "contact_resolver.clients.ReoonVerifier", "options": {"colour": "blue"}}},
        {"carrier_pigeon": {"class": "contact_resolver.clients.ReoonVerifier"}},
    ],
)
def test_bad_collaborator_configuration(collaborators) -> None:
    with pytest.raises(ConfigurationError):
        build_collaborators({"collaborators": collaborators})


def test_build_waterfall_uses_settings() -> None:
    waterfall = build_waterfall(
        {
            "quota": {"backend": "memory", "limits": {"reoon": 10}},
            "waterfall": {"verifier_service": "reoon", "upgrade_generic_with_paid_stages": True},
        },
        enabled_stages=["pattern"],
    )

    assert waterfall.settings.upgrade_generic_with_paid_stages is True
    assert waterfall.enabled_stages == {"pattern"}
    assert waterfall.quota.check_daily_limit("reoon").limit == 10
    assert waterfall.verifier is None
