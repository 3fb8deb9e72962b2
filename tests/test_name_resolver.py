import pytest

from contact_resolver.names import (
    NameDictionary,
    NameResolver,
    is_valid_name_pair,
    is_valid_person_name,
    name_from_email,
    parse_name,
    segment_concatenated_local_part,
    strip_titles,
)


def test_dictionary_lookup_is_case_insensitive() -> None:
    dictionary = NameDictionary(["Kate", "katherine", " Derek "])

    assert "KATE" in dictionary
    assert "derek" in dictionary
    assert "gymer" not in dictionary
    assert 42 not in dictionary
    assert len(dictionary) == 3


def test_dictionary_prefers_longest_prefix() -> None:
    dictionary = NameDictionary(["kat", "kate", "katherine"])

    assert dictionary.names_by_length[0] == "katherine"
    assert dictionary.longest_prefix("katherinejones") == "katherine"
    assert dictionary.longest_prefix("kategymer") == "kate"
    assert dictionary.longest_prefix("zzz") is None


def test_segment_concatenated_local_part_splits_known_first_name() -> None:
    assert segment_concatenated_local_part("kategymer") == ("Kate", "Gymer")


def test_segment_single_name_yields_first_name_only() -> None:
    assert segment_concatenated_local_part("derek") == ("Derek", "")


def test_segment_rejects_role_words_and_noise() -> None:
    assert segment_concatenated_local_part("info") is None
    assert segment_concatenated_local_part("") is None
    assert segment_concatenated_local_part(None) is None
    assert segment_concatenated_local_part("x") is None


def test_segment_rejects_non_name_remainder() -> None:
    resolver = NameResolver(NameDictionary(["kate"]))

    assert resolver.segment_concatenated_local_part("kateoffice") is None
    assert resolver.segment_concatenated_local_part("katex") is None


def test_segment_ignores_digits_and_punctuation() -> None:
    resolver = NameResolver(NameDictionary(["jane"]))

    assert resolver.segment_concatenated_local_part("jane.doe82") == ("Jane", "Doe")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Derek Smith", ("Derek", "Smith")),
        ("Dr. Sarah Jones", ("Sarah", "Jones")),
        ("Prof Jane Smith", ("Jane", "Smith")),
        ("JOHN SMITH", ("John", "Smith")),
        ("Mary Ann De Souza", ("Mary", "Ann De Souza")),
        ("Derek", ("Derek", "")),
    ],
)
def test_parse_name_accepts_people(raw, expected) -> None:
    parsed = parse_name(raw)

    assert (parsed.first_name, parsed.last_name) == expected
    assert not parsed.is_team


@pytest.mark.parametrize(
    "raw",
    [
        "",
        None,
        "A",
        "Practice Manager",
        "Wilson Accountancy",
        "ABC DENTAL CARE LTD",
        "Suite 42",
        "Meet the Team",
        "info",
        "Contact Us",
    ],
)
def test_parse_name_rejects_non_people(raw) -> None:
    parsed = parse_name(raw)

    assert not parsed
    assert parsed.first_name == ""


def test_parse_name_recognises_team_names() -> None:
    parsed = parse_name("CRO Info Team")

    assert parsed.is_team
    assert parsed.first_name == "CRO Info Team"
    assert parsed.last_name == ""


def test_strip_titles() -> None:
    assert strip_titles("Mrs Jane Doe") == "Jane Doe"
    assert strip_titles("Prof. Alan Turing") == "Alan Turing"
    assert strip_titles("Prof Alan Turing") == "Alan Turing"
    assert strip_titles("Drew Barry") == "Drew Barry"
    assert strip_titles("") == ""


def test_is_valid_person_name() -> None:
    assert is_valid_person_name("Kate")
    assert is_valid_person_name("O'Neill")
    assert is_valid_person_name("Anne-Marie")
    assert not is_valid_person_name("Manager")
    assert not is_valid_person_name("Kate2")
    assert not is_valid_person_name("kate@home")
    assert not is_valid_person_name("Supercalifragilistic")
    assert not is_valid_person_name(None)


def test_is_valid_name_pair() -> None:
    assert is_valid_name_pair("Kate", "Gymer")
    assert is_valid_name_pair("Wei", "Li")
    assert is_valid_name_pair("there", None)
    assert not is_valid_name_pair("Wilson", "Accountancy")
    assert not is_valid_name_pair("Cheshire", "Structural")
    assert not is_valid_name_pair("My", "Su")
    assert not is_valid_name_pair("Kate", "Zq")
    assert not is_valid_name_pair("", "Smith")


@pytest.mark.parametrize(
    "email, expected",
    [
        ("john.smith@acme.co.uk", ("John", "Smith")),
        ("sarah_jones@acme.co.uk", ("Sarah", "Jones")),
        ("kategymer@acme.co.uk", ("Kate", "Gymer")),
        ("rosemary@acme.co.uk", ("Rosemary", "")),
        ("derek@acme.co.uk", ("Derek", "")),
    ],
)
def test_name_from_email(email, expected) -> None:
    assert name_from_email(email) == expected


@pytest.mark.parametrize(
    "email",
    ["info@acme.co.uk", "bookings@acme.co.uk", "a1b2c3d4e5@acme.co.uk", "12345@acme.co.uk", "not-an-email", None],
)
def test_name_from_email_rejects_non_personal(email) -> None:
    assert name_from_email(email) is None
