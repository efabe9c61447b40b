# Area: Core
"""
safe_respawn._core.time_format - Remaining-time display
=======================================================

Formats a remaining duration using at most the two largest units.
"""


def format_remaining(seconds: float) -> str:
    """
    Format a duration as its two largest units.

    Fractional seconds are truncated. Days always pair with hours and
    never show minutes or seconds.

        >>> format_remaining(3725)
        '1h 2m'
        >>> format_remaining(97205)
        '1d 3h'
    """
    total = max(0, int(seconds))
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
