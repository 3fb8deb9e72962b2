import pandas as pd
import pytest

from contact_resolver.ingestion.exporters import EXPORT_COLUMNS, export_businesses
from contact_resolver.ingestion.loaders import load_businesses
from contact_resolver.models import (
    BusinessContactState,
    EmailSource,
    NameSource,
    Owner,
    VerificationStatus,
)


@pytest.fixture()
def businesses():
    resolved = BusinessContactState(
        business_name="Acme Plumbing",
        website_url="https://acme.com",
        owner_first_name="Jane",
        owner_last_name="Doe",
        name_source=NameSource.LLM,
        email="jane@acme.com",
        email_source=EmailSource.PATTERN_REOON,
        email_verified=True,
        email_verification_status=VerificationStatus.VALID,
        owners=[
            Owner(first_name="Jane", last_name="Doe", full_name="Jane Doe", title="Director"),
            Owner(first_name="John", last_name="Smith", full_name="John Smith", email="john@acme.com"),
        ],
        source_id="p-1",
    )
    unresolved = BusinessContactState(business_name="Bright Dental", website_url="https://bright.com", source_id="p-2")
    return [resolved, unresolved]


def test_export_businesses_to_csv(businesses, tmp_path):
    output = tmp_path / "out" / "contacts.csv"

    written = export_businesses(businesses, output)

    assert written == output
    dataframe = pd.read_csv(output, dtype=str, keep_default_na=False)
    assert list(dataframe.columns) == list(EXPORT_COLUMNS)
    assert len(dataframe) == 2

    first = dataframe.iloc[0]
    assert first["email"] == "jane@acme.com"
    assert first["email_source"] == "pattern_reoon"
    assert first["greeting_name"] == "Jane"
    assert first["owners"] == "Jane Doe (Director); John Smith (john@acme.com)"
    assert first["exportable"] == "True"
    assert first["confidence"] == "95"

    second = dataframe.iloc[1]
    assert second["greeting_name"] == "there"
    assert second["exportable"] == "False"
    assert "Missing email" in second["export_errors"]


def test_only_exportable_rows_written(businesses, tmp_path):
    output = tmp_path / "contacts.xlsx"

    export_businesses(businesses, output, only_exportable=True)

    dataframe = pd.read_excel(output, sheet_name="Contacts", engine="openpyxl")
    assert dataframe["business_name"].tolist() == ["Acme Plumbing"]


def test_export_can_be_loaded_again(businesses, tmp_path):
    output = tmp_path / "contacts.csv"
    export_businesses(businesses, output)

    reloaded = load_businesses(output)

    assert [business.business_name for business in reloaded] == ["Acme Plumbing", "Bright Dental"]
    first = reloaded[0]
    assert first.source_id == "p-1"
    assert first.email == "jane@acme.com"
    assert first.email_source is EmailSource.PATTERN_REOON
    assert first.email_verification_status is VerificationStatus.VALID
    assert first.name_source is NameSource.LLM
    assert reloaded[1].email is None


def test_unsupported_export_extension(businesses, tmp_path):
    with pytest.raises(ValueError):
        export_businesses(businesses, tmp_path / "contacts.json")
