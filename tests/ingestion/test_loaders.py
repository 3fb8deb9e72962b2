import pandas as pd
import pytest

from contact_resolver.ingestion.loaders import UnsupportedFileTypeError, load_businesses
from contact_resolver.models import EmailSource, NameSource, VerificationStatus


@pytest.fixture()
def sample_dataframe():
    return pd.DataFrame(
        [
            {
                "Place ID": "p-1",
                "Company": "Acme Plumbing",
                "Website": "https://www.acme-plumbing.co.uk/contact",
                "Owner": "Jane",
                "Owner Surname": "Doe",
            },
            {
                "Place ID": "p-2",
                "Company": "Bright Dental",
                "Website": "",
                "Owner": "",
                "Owner Surname": "",
            },
            {
                "Place ID": "",
                "Company": "",
                "Website": "",
                "Owner": "",
                "Owner Surname": "",
            },
        ]
    )


def test_load_businesses_from_csv_with_mapping(sample_dataframe, tmp_path):
    csv_path = tmp_path / "businesses.csv"
    sample_dataframe.to_csv(csv_path, index=False)

    businesses = load_businesses(
        csv_path,
        column_mapping={
            "source_id": "Place ID",
            "business_name": "Company",
            "website_url": "Website",
            "owner_first_name": "Owner",
            "owner_last_name": "Owner Surname",
        },
    )

    assert len(businesses) == 2
    first, second = businesses
    assert first.source_id == "p-1"
    assert first.business_name == "Acme Plumbing"
    assert first.domain == "acme-plumbing.co.uk"
    assert (first.owner_first_name, first.owner_last_name) == ("Jane", "Doe")
    assert first.name_is_fallback is False
    assert first.name_source is NameSource.NONE
    assert first.email is None
    assert first.email_source is EmailSource.NONE

    assert second.website_url is None
    assert second.domain is None
    assert second.greeting_name == "there"


def test_load_businesses_from_excel_uses_synonyms(tmp_path):
    dataframe = pd.DataFrame(
        [
            {
                "Business Name": "Acme",
                "URL": "acme.com",
                "First Name": "Kate",
                "Email": "Kate@Acme.com",
                "Email Source": "website_scrape",
                "Verification Status": "valid",
            }
        ]
    )
    excel_path = tmp_path / "businesses.xlsx"
    dataframe.to_excel(excel_path, index=False)

    [business] = load_businesses(excel_path)

    assert business.business_name == "Acme"
    assert business.domain == "acme.com"
    assert business.owner_first_name == "Kate"
    assert business.email == "kate@acme.com"
    assert business.email_source is EmailSource.WEBSITE_SCRAPE
    assert business.email_verification_status is VerificationStatus.VALID
    assert business.email_verified is True


def test_unknown_enum_values_fall_back_to_defaults(tmp_path, caplog):
    csv_path = tmp_path / "businesses.csv"
    csv_path.write_text(
        "business_name,email,email_source,name_source\nAcme,info@acme.com,carrier_pigeon,psychic\n",
        encoding="utf-8",
    )

    [business] = load_businesses(csv_path)

    assert business.email_source is EmailSource.NONE
    assert business.name_source is NameSource.NONE
    assert business.email_verification_status is VerificationStatus.UNCHECKED
    assert business.email_verified is False
    assert "Ignoring unknown EmailSource value" in caplog.text


def test_site_published_addresses_count_as_verified(tmp_path):
    csv_path = tmp_path / "businesses.csv"
    csv_path.write_text(
        "business_name,email,email_source\n"
        "Acme,jane@acme.com,website_scrape\n"
        "Bright,tom@bright.com,pattern_reoon\n",
        encoding="utf-8",
    )

    published, guessed = load_businesses(csv_path)

    assert published.email_verification_status is VerificationStatus.VALID
    assert published.email_verified is True
    assert guessed.email_verification_status is VerificationStatus.UNCHECKED
    assert guessed.email_verified is False


def test_load_businesses_rejects_unknown_extension(tmp_path):
    path = tmp_path / "businesses.txt"
    path.write_text("irrelevant", encoding="utf-8")

    with pytest.raises(UnsupportedFileTypeError):
        load_businesses(path)
