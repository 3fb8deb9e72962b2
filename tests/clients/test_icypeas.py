import pytest

from contact_resolver.clients import IcypeasFinder, ServiceResponseError
from contact_resolver.clients.icypeas import backoff_delay
from contact_resolver.quota import QuotaExceededError


class FakeResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = ""

    def json(self):
        return self._payload


class ScriptedSession:
    """Replays queued responses for successive POST requests."""

    def __init__(self, *payloads) -> None:
        self.payloads = list(payloads)
        self.posts = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.posts.append((url, json, headers))
        payload = self.payloads.pop(0)
        if isinstance(payload, FakeResponse):
            return payload
        return FakeResponse(payload)


def _submitted(search_id: str = "abc") -> dict:
    return {"success": True, "item": {"_id": search_id, "status": "NONE"}}


def _read(status: str, emails=None) -> dict:
    return {"success": True, "items": [{"status": status, "results": {"emails": emails or []}}]}


def _finder(session, sleeps) -> IcypeasFinder:
    return IcypeasFinder("icy-key", session=session, sleep=sleeps.append)


def test_backoff_doubles_and_caps() -> None:
    assert [backoff_delay(n) for n in range(1, 7)] == [2.0, 4.0, 8.0, 16.0, 16.0, 16.0]


def test_search_then_poll_until_found() -> None:
    sleeps = []
    session = ScriptedSession(
        _submitted(),
        _read("SCHEDULED"),
        _read("IN_PROGRESS"),
        _read("DEBITED", [{"email": "Jane.Doe@acme.com", "certainty": "ultra_sure"}]),
    )

    result = _finder(session, sleeps).find_email("Jane", "Doe", "acme.com")

    assert [entry.email for entry in result.emails] == ["Jane.Doe@acme.com"]
    assert result.emails[0].certainty == "ultra_sure"
    assert sleeps == [2.0, 4.0]

    submit_url, submit_body, headers = session.posts[0]
    assert submit_url == "https://app.icypeas.com/api/email-search"
    assert submit_body == {"firstname": "Jane", "lastname": "Doe", "domainOrCompany": "acme.com"}
    assert headers["Authorization"] == "icy-key"
    assert session.posts[1][0] == "https://app.icypeas.com/api/bulk-single-searchs/read"
    assert session.posts[1][1] == {"id": "abc"}


def test_not_found_returns_empty_result() -> None:
    session = ScriptedSession(_submitted(), _read("NOT_FOUND"))

    result = _finder(session, []).find_email("Jane", "Doe", "acme.com")

    assert result.emails == []


def test_gives_up_after_max_attempts() -> None:
    sleeps = []
    session = ScriptedSession(_submitted(), _read("SCHEDULED"), _read("SCHEDULED"), _read("SCHEDULED"))
    finder = IcypeasFinder("icy-key", session=session, sleep=sleeps.append, max_poll_attempts=3)

    with pytest.raises(ServiceResponseError, match="still pending"):
        finder.find_email("Jane", "Doe", "acme.com")

    assert sleeps == [2.0, 4.0]


def test_rejected_search_raises() -> None:
    session = ScriptedSession({"success": False, "error": "bad domain"})

    with pytest.raises(ServiceResponseError, match="bad domain"):
        _finder(session, []).find_email("Jane", "Doe", "acme.com")


def test_out_of_credits_is_quota_signal() -> None:
    session = ScriptedSession(FakeResponse({"message": "Quota exceeded"}, status_code=402))

    with pytest.raises(QuotaExceededError) as excinfo:
        _finder(session, []).find_email("Jane", "Doe", "acme.com")

    assert excinfo.value.service == "icypeas"


def test_domain_required() -> None:
    with pytest.raises(ValueError):
        _finder(ScriptedSession(), []).find_email("Jane", "Doe", "")
