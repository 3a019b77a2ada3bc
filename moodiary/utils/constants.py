WEATHER_TIMEOUT = 10  # seconds
TREND_BAR_WIDTH = 5  # one block per mood rank
NOTES_PREVIEW_LIMIT = 30  # most recent entries shown by /notes
