"""
URL Expiry Policy

서명 URL 만료 시간 정규화 및 설정 문자열 파싱
"""

import math
import re
from datetime import timedelta
from typing import Optional, Union

from errors import ConfigurationError

ExpiryLike = Union[timedelta, int, float, None]

# provider별 기본 만료 시간
S3_FALLBACK_EXPIRY = timedelta(hours=1)
AZURE_FALLBACK_EXPIRY = timedelta(hours=1)
GCS_FALLBACK_EXPIRY = timedelta(days=1)

_SIMPLE_DURATION = re.compile(r"^(\d+)\s*([smhd])$", re.IGNORECASE)
_ISO_DURATION = re.compile(
    r"^P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$",
    re.IGNORECASE,
)
_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def to_timedelta(value: ExpiryLike) -> Optional[timedelta]:
    """timedelta 또는 초 단위 숫자를 timedelta로 변환"""
    if value is None or isinstance(value, timedelta):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Unsupported expiry type: {type(value).__name__}")
    return timedelta(seconds=value)


def normalize_expiry(requested: ExpiryLike, fallback: timedelta) -> timedelta:
    """
    만료 시간 정규화

    requested가 None, 0, 음수이면 fallback, 아니면 requested를 초 단위로 올림.
    서명기는 정수 초를 받으므로 1초 미만 값도 최소 1초가 된다.
    상한은 두지 않는다 (provider 서명기가 거부하면 SigningError로 드러남).
    """
    expiry = to_timedelta(requested)
    if expiry is None or expiry <= timedelta(0):
        return fallback
    return timedelta(seconds=math.ceil(expiry.total_seconds()))


def parse_duration(text: Optional[str]) -> Optional[timedelta]:
    """
    설정용 기간 문자열 파싱

    "30s", "15m", "1h", "8h", "14d" 또는 ISO-8601 ("PT8H", "P14D", "P1DT2H").
    빈 값은 None.
    """
    if text is None or not text.strip():
        return None
    value = text.strip()

    match = _SIMPLE_DURATION.match(value)
    if match:
        amount, unit = match.groups()
        return timedelta(**{_UNITS[unit.lower()]: int(amount)})

    match = _ISO_DURATION.match(value)
    if match and value.upper() not in ("P", "PT") and not value.upper().endswith("T"):
        parts = {k: float(v) for k, v in match.groupdict().items() if v is not None}
        if parts:
            return timedelta(**parts)

    raise ConfigurationError(
        f"Invalid duration value: '{text}'. "
        "Use e.g. '1h', '8h', '14d' or ISO-8601 such as 'PT8H'"
    )
