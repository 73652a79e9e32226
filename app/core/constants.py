"""Application constants."""

# Dashboard
RECENT_WORKOUTS_LIMIT = 5
WEEKLY_WINDOW_DAYS = 7

# Workout listing
DEFAULT_WORKOUT_PAGE_SIZE = 50

# Chat completion limits
CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 1000

DEFAULT_AVATAR_ID = "dumbbell"
DEFAULT_AVATAR_EMOJI = "\U0001F464"  # bust in silhouette

# Selectable profile avatars: (id, emoji, label)
AVATARS: tuple[tuple[str, str, str], ...] = (
    ("dumbbell", "\U0001F4AA", "Dumbbell"),
    ("runner", "\U0001F3C3", "Runner"),
    ("cyclist", "\U0001F6B4", "Cyclist"),
    ("swimmer", "\U0001F3CA", "Swimmer"),
    ("basketball", "\U0001F3C0", "Basketball"),
    ("football", "⚽", "Football"),
    ("tennis", "\U0001F3BE", "Tennis"),
    ("yoga", "\U0001F9D8", "Yoga"),
    ("mountain", "\U0001F3D4️", "Hiking"),
    ("weightlifter", "\U0001F3CB️", "Weightlifter"),
    ("boxing", "\U0001F94A", "Boxing"),
    ("medal", "\U0001F3C5", "Medal"),
)
