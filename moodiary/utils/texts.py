WELCOME_MESSAGE = (
    "Hi! This is <b>Moodiary</b>, your mood journal.\n\n"
    "Pick a day in /calendar, then record how you feel with /mood. "
    "One entry per day: saving again the same day replaces it.\n\n"
    "Share your location with me to attach the weather to your entries.\n\n"
    "/help lists everything I can do."
)

HELP_MESSAGE = (
    "<b>Commands</b>\n"
    "/calendar: browse months and select a day\n"
    "/mood: record a mood and a note for the selected day\n"
    "/diary: mood trend\n"
    "/notes: all notes\n"
    "/cancel: drop the entry you are writing\n\n"
    "Only today and future days can be written. Past days are read-only."
)

MOOD_PROMPT = "How do you feel on {day}?\n🌡️ {temperature}"
NOTE_PROMPT = "Mood: {mood}\n\nNow add a note for {day}."
READ_ONLY_DAY = "{day} is in the past and can only be viewed."
SAVED_MESSAGE = "Mood saved successfully!"
CANCELLED_MESSAGE = "Entry discarded."
NO_ENTRY_FOR_DAY = "No entry for {day}."
LOCATION_SAVED = "Location saved. I'll attach the current weather to your entries."
