"""Duration formatting helpers."""


def format_hms(total_seconds: float) -> str:
    """Format seconds as ``HH:MM:SS``. Negative input renders as zero."""
    total = max(0, int(total_seconds))
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_min_sec(total_seconds: float) -> str:
    """Format seconds as ``MM:SS``; minutes are not wrapped at one hour."""
    total = max(0, int(total_seconds))
    return f"{total // 60:02d}:{total % 60:02d}"
