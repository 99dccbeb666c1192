from datetime import datetime, timezone

import icu


class IcuDateFormatter:
    """Formats timestamps with an ICU pattern, locale and time zone."""

    def __init__(
        self,
        locale: str = "fr_FR",
        pattern: str = "dd/MM/yyyy",
        time_zone: str = "UTC",
    ) -> None:
        self._format = icu.SimpleDateFormat(pattern, icu.Locale(locale))
        self._format.setTimeZone(icu.TimeZone.createTimeZone(time_zone))

    def format(self, value: datetime) -> str:
        # Naive datetimes are taken as UTC.
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str(self._format.format(value.timestamp()))
