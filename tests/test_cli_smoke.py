"""Smoke tests for the CLI entry point."""
from __future__ import annotations

import json

import pandas as pd
import pytest

from contact_resolver import __main__
from contact_resolver.cli import main


def _write_config(tmp_path) -> str:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "quota": {"backend": "memory", "limits": {"reoon": 50}},
                "collaborators": {
                    "site_extractor": {
                        "class": "contact_resolver.clients.RecordedSiteExtractor",
                        "options": {
                            "fixture": {
                                "https://acme.com": {
                                    "owner_names": [
                                        {
                                            "name": "Jane Doe",
                                            "title": "Owner",
                                            "matched_email": "jane@acme.com",
                                            "has_email_match": True,
                                        }
                                    ],
                                    "emails": ["info@acme.com", "jane@acme.com"],
                                }
                            }
                        },
                    },
                    "verifier": {
                        "class": "contact_resolver.clients.RecordedVerifier",
                        "options": {"fixture": {"tom.baker@bright.com": "valid"}},
                    },
                },
            }
        ),
        encoding="utf-8",
    )
    return str(config_path)


def _write_input(tmp_path) -> str:
    input_path = tmp_path / "input.csv"
    input_path.write_text(
        "business_name,website,first_name,last_name\n"
        "Acme Plumbing,https://acme.com,,\n"
        "Bright Dental,https://bright.com,Tom,Baker\n",
        encoding="utf-8",
    )
    return str(input_path)


def test_cli_smoke_runs_with_recorded_collaborators(tmp_path) -> None:
    output_path = tmp_path / "results.csv"

    exit_code = main([_write_input(tmp_path), str(output_path), "--config", _write_config(tmp_path)])

    assert exit_code == 0
    assert output_path.exists()
    results = pd.read_csv(output_path, dtype=str, keep_default_na=False)
    assert results["email"].tolist() == ["jane@acme.com", "tom.baker@bright.com"]
    assert results["email_source"].tolist() == ["website_scrape", "pattern_reoon"]
    assert results["owner_first_name"].tolist() == ["Jane", "Tom"]


def test_cli_stage_selection_limits_work(tmp_path) -> None:
    output_path = tmp_path / "results.csv"

    exit_code = main(
        [
            _write_input(tmp_path),
            str(output_path),
            "--config",
            _write_config(tmp_path),
            "--stages",
            "site_regex",
            "--limit",
            "1",
        ]
    )

    assert exit_code == 0
    results = pd.read_csv(output_path, dtype=str, keep_default_na=False)
    assert results["business_name"].tolist() == ["Acme Plumbing"]


def test_cli_dry_run_prints_plan(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    output_path = tmp_path / "results.csv"

    exit_code = main([_write_input(tmp_path), str(output_path), "--config", _write_config(tmp_path), "--dry-run"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Acme Plumbing: site_regex" in captured.out
    assert "Bright Dental: site_regex, pattern" in captured.out
    assert not output_path.exists()


def test_cli_unknown_stage_is_configuration_error(tmp_path) -> None:
    exit_code = main(
        [
            _write_input(tmp_path),
            str(tmp_path / "results.csv"),
            "--config",
            _write_config(tmp_path),
            "--stages",
            "crystal_ball",
        ]
    )

    assert exit_code == 2


def test_module_entry_point_delegates_to_cli(tmp_path) -> None:
    """The package entry point should behave like the CLI."""

    output_path = tmp_path / "results.csv"

    exit_code = __main__.main([_write_input(tmp_path), str(output_path), "--config", _write_config(tmp_path)])

    assert exit_code == 0
    assert "tom.baker@bright.com" in output_path.read_text(encoding="utf-8")


def test_module_entry_point_without_arguments_shows_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = __main__.main([])

    captured = capsys.readouterr()
    assert "python -m contact_resolver" in captured.out
    assert exit_code == 2
