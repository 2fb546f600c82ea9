# chesstime/utils/duration.py


def format_duration(seconds: int) -> str:
    """Render a second count as "Hh Mm Ss"; hours keep growing past a day."""
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours}h {minutes}m {secs}s"
