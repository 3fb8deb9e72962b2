import pytest

from contact_resolver.emails import (
    extract_domain,
    generate_email_patterns,
    is_generic_email,
    is_personal_email,
    is_plausible_email,
    is_social_url,
)
from contact_resolver.emails.verification import (
    apply_verification_error,
    apply_verification_result,
    classify_verification,
    mark_published,
)
from contact_resolver.models import (
    BusinessContactState,
    EmailSource,
    NameSource,
    VerificationResult,
    VerificationStatus,
)


@pytest.mark.parametrize(
    "email",
    [
        "hello@example.com",
        "bookings@x.com",
        "INFO@Acme.co.uk",
        "info.2@acme.co.uk",
        "sales.team@acme.co.uk",
        "enquiry@acme.co.uk",
    ],
)
def test_generic_emails(email) -> None:
    assert is_generic_email(email)
    assert not is_personal_email(email)


@pytest.mark.parametrize(
    "email",
    [
        "hello.world@example.com",
        "derek@x.com",
        "information@acme.co.uk",
        "infodesk@acme.co.uk",
        "kate.gymer@acme.co.uk",
    ],
)
def test_personal_emails(email) -> None:
    assert not is_generic_email(email)
    assert is_personal_email(email)


def test_empty_values_are_neither_generic_nor_personal() -> None:
    for value in (None, "", "no-at-sign"):
        assert not is_generic_email(value)
        assert not is_personal_email(value)


@pytest.mark.parametrize(
    "email",
    [
        "logo_header@2x.png",
        "banner@300x200@acme.co.uk",
        "user@example.com",
        "abc@sentry.wixpress.com",
        "0123456789abcdef0123@acme.co.uk",
        "not an email",
        "",
        None,
    ],
)
def test_implausible_emails(email) -> None:
    assert not is_plausible_email(email)


def test_plausible_email() -> None:
    assert is_plausible_email("kate.gymer@acme.co.uk")
    assert is_plausible_email("derek@x.com")


def test_extract_domain() -> None:
    assert extract_domain("https://www.Acme.co.uk/about") == "acme.co.uk"
    assert extract_domain("acme.co.uk") == "acme.co.uk"
    assert extract_domain("http://x.com") == "x.com"
    assert extract_domain("") is None
    assert extract_domain(None) is None


def test_is_social_url() -> None:
    assert is_social_url("https://www.facebook.com/acmebakery")
    assert is_social_url("https://m.facebook.com/acmebakery")
    assert not is_social_url("https://acme.co.uk")
    assert not is_social_url(None)


def test_generate_email_patterns_in_order() -> None:
    assert generate_email_patterns("Jane", "Doe", "acme.com") == [
        "jane@acme.com",
        "jane.doe@acme.com",
        "j.doe@acme.com",
        "janedoe@acme.com",
        "jdoe@acme.com",
        "doe@acme.com",
        "jane_doe@acme.com",
    ]


def test_generate_email_patterns_first_name_only() -> None:
    assert generate_email_patterns("Derek", None, "x.com") == ["derek@x.com"]
    assert generate_email_patterns("Derek", "", "x.com") == ["derek@x.com"]


def test_generate_email_patterns_cleans_names() -> None:
    assert generate_email_patterns("Anne-Marie", "O'Neill", "acme.com")[1] == "annemarie.oneill@acme.com"
    assert generate_email_patterns("", "Doe", "acme.com") == []
    assert generate_email_patterns("Jane", "Doe", None) == []


def _state(**overrides) -> BusinessContactState:
    values = dict(
        business_name="Acme",
        website_url="https://acme.com",
        owner_first_name="Jane",
        owner_last_name="Doe",
        name_source=NameSource.REGEX,
        email="jane@acme.com",
        email_source=EmailSource.PATTERN_REOON,
    )
    values.update(overrides)
    return BusinessContactState(**values)


def test_classify_verification() -> None:
    assert classify_verification(VerificationResult("a@b.com", True, "valid")) is VerificationStatus.VALID
    assert classify_verification(VerificationResult("a@b.com", False, "RISKY")) is VerificationStatus.RISKY
    assert classify_verification(VerificationResult("a@b.com", False, "invalid")) is VerificationStatus.INVALID
    assert classify_verification(VerificationResult("a@b.com", False, "unknown")) is VerificationStatus.INVALID


def test_valid_result_keeps_email() -> None:
    state = _state()

    status = apply_verification_result(state, VerificationResult("jane@acme.com", True, "safe"))

    assert status is VerificationStatus.VALID
    assert state.email == "jane@acme.com"
    assert state.email_verified is True


def test_risky_result_keeps_email_unverified() -> None:
    state = _state()

    apply_verification_result(state, VerificationResult("jane@acme.com", False, "risky"))

    assert state.email == "jane@acme.com"
    assert state.email_verified is False
    assert state.email_verification_status is VerificationStatus.RISKY


def test_invalid_result_clears_only_the_email() -> None:
    state = _state()
    before = dict(vars(state))

    apply_verification_result(state, VerificationResult("jane@acme.com", False, "invalid"))

    assert state.email is None
    assert state.email_verified is False
    assert state.email_verification_status is VerificationStatus.INVALID
    changed = {key for key, value in vars(state).items() if before[key] != value}
    assert changed == {"email", "email_verified", "email_verification_status"}


def test_verification_error_keeps_email_unchecked() -> None:
    state = _state()

    apply_verification_error(state, TimeoutError("timed out"))

    assert state.email == "jane@acme.com"
    assert state.email_verified is False
    assert state.email_verification_status is VerificationStatus.UNCHECKED


def test_mark_published() -> None:
    state = _state(email_source=EmailSource.WEBSITE_SCRAPE)

    mark_published(state)

    assert state.email_verified is True
    assert state.email_verification_status is VerificationStatus.VALID
