"""
만료 시간 정책 테스트
"""

from datetime import timedelta

import pytest

from errors import ConfigurationError
from storage.expiry import (
    normalize_expiry,
    parse_duration,
    to_timedelta,
    S3_FALLBACK_EXPIRY,
    AZURE_FALLBACK_EXPIRY,
    GCS_FALLBACK_EXPIRY,
)

FALLBACK = timedelta(minutes=42)


class TestNormalizeExpiry:
    """normalize_expiry 테스트"""

    @pytest.mark.parametrize("requested", [None, 0, -5, timedelta(0), timedelta(seconds=-1)])
    def test_invalid_values_use_fallback(self, requested):
        assert normalize_expiry(requested, FALLBACK) == FALLBACK

    def test_valid_value_is_unchanged(self):
        assert normalize_expiry(timedelta(hours=2), FALLBACK) == timedelta(hours=2)

    def test_seconds_are_accepted(self):
        assert normalize_expiry(90, FALLBACK) == timedelta(seconds=90)

    @pytest.mark.parametrize("requested, expected", [
        (0.5, timedelta(seconds=1)),
        (timedelta(milliseconds=1), timedelta(seconds=1)),
        (90.2, timedelta(seconds=91)),
    ])
    def test_fractional_seconds_round_up(self, requested, expected):
        assert normalize_expiry(requested, FALLBACK) == expected

    def test_no_upper_bound(self):
        assert normalize_expiry(timedelta(days=365), FALLBACK) == timedelta(days=365)

    @pytest.mark.parametrize("requested", [None, -1, 0, 30, timedelta(hours=3)])
    def test_idempotent(self, requested):
        once = normalize_expiry(requested, FALLBACK)
        assert normalize_expiry(once, FALLBACK) == once

    def test_rejects_unsupported_type(self):
        with pytest.raises(TypeError):
            to_timedelta("1h")

    def test_provider_fallbacks(self):
        assert S3_FALLBACK_EXPIRY == timedelta(hours=1)
        assert AZURE_FALLBACK_EXPIRY == timedelta(hours=1)
        assert GCS_FALLBACK_EXPIRY == timedelta(days=1)


class TestParseDuration:
    """설정 문자열 파싱 테스트"""

    @pytest.mark.parametrize("text, expected", [
        ("1h", timedelta(hours=1)),
        ("8h", timedelta(hours=8)),
        ("14d", timedelta(days=14)),
        ("30m", timedelta(minutes=30)),
        ("45s", timedelta(seconds=45)),
        (" 2H ", timedelta(hours=2)),
        ("PT8H", timedelta(hours=8)),
        ("P14D", timedelta(days=14)),
        ("P1DT2H30M", timedelta(days=1, hours=2, minutes=30)),
        ("pt90s", timedelta(seconds=90)),
    ])
    def test_valid(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_is_none(self, text):
        assert parse_duration(text) is None

    @pytest.mark.parametrize("text", ["forever", "1w", "P", "PT", "P1DT", "h1"])
    def test_invalid_raises(self, text):
        with pytest.raises(ConfigurationError):
            parse_duration(text)
