"""Locale-aware timestamp formatting."""

from datetime import datetime

from babel.dates import format_date, format_time, get_datetime_format

from temuria.data import LANGUAGES, LanguageCode


def format_last_updated(moment: datetime, language: LanguageCode | str) -> str:
    """Format a timestamp as long date plus hour and minute.

    Follows the locale's own date-time ordering, e.g. ``"October 19, 2026
    at 6:47 AM"`` for English or ``"19 октября 2026 г., 06:47"`` for
    Russian.

    Args:
        moment: Timestamp to format (aware or naive; shown as given).
        language: Target language code. Unknown codes fall back to English.

    Returns:
        Localized display string.
    """
    locale = LANGUAGES[LanguageCode.parse(language)].locale
    date_part = format_date(moment, format="long", locale=locale)
    time_part = format_time(moment, format="short", locale=locale)
    pattern = get_datetime_format("long", locale=locale)
    return pattern.replace("'", "").replace("{0}", time_part).replace("{1}", date_part)
