"""Packaged data assets: the Umm al-Qura year table (uaq_years.csv)."""
