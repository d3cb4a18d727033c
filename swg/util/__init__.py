from .misc import now_iso, format_seconds, format_diff

__all__ = ["now_iso", "format_seconds", "format_diff"]
