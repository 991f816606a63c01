"""English month and weekday names for Hijri formatting."""

MONTHS_LONG = (
    "Muharram",
    "Safar",
    "Rabi' al-Awwal",
    "Rabi' al-Thani",
    "Jumada al-Ula",
    "Jumada al-Akhirah",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
)

MONTHS_MEDIUM = (
    "Muharram",
    "Safar",
    "Rabi' I",
    "Rabi' II",
    "Jumada I",
    "Jumada II",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
)

MONTHS_SHORT = ("Muh", "Saf", "Rab1", "Rab2", "Jum1", "Jum2", "Raj", "Sha", "Ram", "Shw", "DhQ", "DhH")

# Index 0 = Sunday (yawm al-ahad, "first day"), ... 6 = Saturday.
WEEKDAYS_LONG = (
    "Yawm al-Ahad",
    "Yawm al-Ithnayn",
    "Yawm ath-Thulatha'",
    "Yawm al-Arba'a'",
    "Yawm al-Khamis",
    "Yawm al-Jum'ah",
    "Yawm as-Sabt",
)

WEEKDAYS_SHORT = ("Ahad", "Ithn", "Thul", "Arba", "Kham", "Jumu", "Sabt")

WEEKDAYS_NUMERIC = (1, 2, 3, 4, 5, 6, 7)

ERA = "AH"
