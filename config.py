# -*- coding: utf-8 -*-
"""
Default roster configuration. All tunable values for generation and export live here.
"""

ENGLISH_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
TAMIL_DAYS = ["திங்கள்", "செவ்வாய்", "புதன்", "வியாழன்", "வெள்ளி", "சனி", "ஞாயிறு"]

CONFIG = {
    # Weekday labels written into generated rows, indexed by date.weekday()
    "weekday_names": TAMIL_DAYS,

    # Placeholder text
    "placeholders": {
        "no_staff": "N/A",  # role has no eligible staff at the location
        "no_rule": "-",     # weekday has no sharing rule (or none of its locations is active)
    },

    # Memoized generations kept by SchedulerService
    "cache_size": 32,

    "log_level": "INFO",

    # Spreadsheet / CSV export
    "export": {
        "sheet_title": "Schedule",
        "file_prefix": "அறவழிபாடு_அட்டவணை",
        "headers": [
            "தேதி",
            "கிழமை",
            "சிந்தனை",
            "திருக்குறள்",
            "பகிர்வு-1 (இடம்)",
            "பகிர்வு இடம் (2,3,4)",
            "பகிர்வு-2",
            "பகிர்வு-3",
            "பகிர்வு-4",
        ],
        "column_widths": [15, 12, 25, 40, 20, 20, 25, 25, 25],
    },
}


def merged(overrides: dict | None = None) -> dict:
    """Return CONFIG with ``overrides`` applied one level deep."""
    out = {key: (dict(value) if isinstance(value, dict) else value) for key, value in CONFIG.items()}
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key].update(value)
        else:
            out[key] = value
    return out
