"""Darkmaze: grid motion and flashlight illumination for maze crawlers."""
