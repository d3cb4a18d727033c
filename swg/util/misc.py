from datetime import datetime



# Simply returns the current local time as an ISO8601 string with timezone offset.
def now_iso():
    return datetime.now().astimezone().isoformat()


# Whole-second display used for the target readout, e.g. 12.0 -> "12".
def format_seconds(seconds):
    return f"{max(0.0, float(seconds)):.0f}"


# Error display for results, always two decimals, e.g. 0.456 -> "0.46".
def format_diff(diff):
    return f"{abs(float(diff)):.2f}"
