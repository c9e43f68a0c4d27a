"""
openers.py

Precomputed starting words per word length, shown before any feedback
exists so the first suggestion needs no ranking pass.
"""

DEFAULT_LENGTH = 5

BEST_STARTING_WORDS = {
    3: ["ACE", "ATE", "TEA", "SEA", "EAR", "ARE"],
    4: ["TEAR", "RATE", "TALE", "LATE", "REAL", "EARL"],
    5: [
        "CRANE", "SLATE", "SOARE", "ADIEU", "STARE", "ROATE",
        "SALET", "RAISE", "AROSE", "AUDIO", "IRATE", "TRACE",
    ],
    6: ["STRAIN", "SEATED", "BRAINS", "TRAINS"],
    7: ["STARTED", "SERIOUS", "TRAINED", "AGAINST", "STRANGE", "CREATES"],
    8: ["STARTING", "REACTION", "CREATION", "STRENGTH", "STRANGER", "DISTANCE"],
    9: ["STRONGEST", "IMPORTANT", "REACTIONS", "STRANGELY", "CREATURES", "STRANGERS"],
    10: ["STRENGTHEN", "IMPORTANCE", "CATEGORIES", "BRIGHTNESS"],
    11: ["CONSIDERING", "INFORMATION", "REPRESENTED", "DEVELOPMENT", "AGRICULTURE", "TEMPERATURE"],
    12: ["CONVERSATION", "ORGANIZATION", "APPRECIATION", "CONSTRUCTION", "REGISTRATION", "COMBINATIONS"],
}


def has_starting_words(length):
    return length in BEST_STARTING_WORDS


def starting_words(length=DEFAULT_LENGTH):
    """Suggested openers for this length, or the 5-letter list if none exist."""
    return list(BEST_STARTING_WORDS.get(length, BEST_STARTING_WORDS[DEFAULT_LENGTH]))
