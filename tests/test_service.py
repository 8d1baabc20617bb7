"""Tests for the service boundary helpers and entities."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from phrasesync.errors import ServiceError
from phrasesync.models import Locale, RateLimit
from phrasesync.service import TranslationService, find_default_locale_name

from tests.helpers.service import FakeService


class TestFindDefaultLocaleName:
    """Default locale lookup."""

    def test_flagged_locale(self, service: FakeService) -> None:
        """The locale flagged as default is returned by name."""
        assert find_default_locale_name(service) == "en"

    def test_follows_service_state(self, service: FakeService) -> None:
        """Each call asks the service again."""
        service.make_default_locale("de")
        assert find_default_locale_name(service) == "de"
        assert service.list_calls == 1

    def test_no_default(self) -> None:
        """Projects without a default yield the empty name."""
        service = FakeService(locales=[Locale(name="de"), Locale(name="fr")])
        assert find_default_locale_name(service) == ""

    def test_errors_propagate(self) -> None:
        """Listing failures are raised to the caller."""
        service = FakeService(list_error=ServiceError("500", status_code=500))
        with pytest.raises(ServiceError):
            find_default_locale_name(service)


class TestModels:
    """Entity behavior."""

    def test_identifier_prefers_code(self) -> None:
        """identifier is the code when present, else the name."""
        assert Locale(name="de", code="de-DE").identifier == "de-DE"
        assert Locale(name="de").identifier == "de"

    @pytest.mark.parametrize(
        ("remaining", "exhausted"),
        [(0, True), (1, False), (59, False)],
    )
    def test_rate_limit_exhausted(self, remaining: int, exhausted: bool) -> None:
        """Only zero remaining requests count as exhausted."""
        limit = RateLimit(limit=60, remaining=remaining, reset=datetime(2026, 1, 1, tzinfo=UTC))
        assert limit.exhausted is exhausted

    def test_fake_satisfies_protocol(self, service: FakeService) -> None:
        """The test double implements every protocol method."""
        checked: TranslationService = service
        assert checked.list_tags() == []
        assert checked.create_locale("it").name == "it"
