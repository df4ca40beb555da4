import re
from typing import Optional

_TIMEZONE_RE = re.compile(r"\b(WIB|WITA|WIT)\b", re.IGNORECASE)
_EXTRA_INFO_RE = re.compile(r"\s*\(([^)]+)\)\s*$")
_TIME_RE = re.compile(r"(\d{1,2}:\d{2})")


def format_event_time(time_display: Optional[str], timezone: Optional[str] = None) -> str:
    """Normalise an event time string, e.g. "Mulai 19:00 WIB" -> "19:00 - Selesai WIB"."""
    if not time_display or not isinstance(time_display, str):
        return "Informasi waktu tidak tersedia"

    processed = re.sub(r"^Mulai\s+", "", time_display, flags=re.IGNORECASE).strip()
    tz_suffix = f" {timezone.upper()}" if timezone else ""

    tz_match = _TIMEZONE_RE.search(processed)
    if tz_match:
        tz_suffix = f" {tz_match.group(0).upper()}"
        processed = _TIMEZONE_RE.sub("", processed, count=1).strip()

    extra_info = ""
    extra_match = _EXTRA_INFO_RE.search(processed)
    if extra_match:
        extra_info = f" ({extra_match.group(1).strip()})"
        processed = _EXTRA_INFO_RE.sub("", processed, count=1).strip()

    if " - " in processed:
        parts = re.split(r"\s+-\s+", processed)
        start_match = _TIME_RE.search(parts[0])
        if start_match:
            end = parts[1].strip()
            if _TIME_RE.search(end):
                return f"{start_match.group(0)} - {end}{tz_suffix}{extra_info}"
            return f"{start_match.group(0)} - Selesai{tz_suffix}{extra_info}"
    else:
        single = _TIME_RE.search(processed)
        if single and processed.strip() == single.group(0):
            return f"{single.group(0)} - Selesai{tz_suffix}{extra_info}"
    return time_display


def format_rupiah(amount: int) -> str:
    if amount == 0:
        return "Gratis"
    return "Rp " + f"{amount:,}".replace(",", ".")
