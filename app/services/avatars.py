"""Avatar catalogue lookups (emoji avatars; no image storage)."""

from app.core.constants import AVATARS, DEFAULT_AVATAR_EMOJI

_EMOJI_BY_ID = {avatar_id: emoji for avatar_id, emoji, _ in AVATARS}


def list_avatars() -> list[dict[str, str]]:
    return [{"id": a, "emoji": e, "label": label} for a, e, label in AVATARS]


def is_known_avatar(avatar_id: str) -> bool:
    return avatar_id in _EMOJI_BY_ID


def get_avatar_emoji(avatar_id: str | None) -> str:
    """Emoji for an avatar id; unknown or missing ids get the default silhouette."""
    if not avatar_id:
        return DEFAULT_AVATAR_EMOJI
    return _EMOJI_BY_ID.get(avatar_id, DEFAULT_AVATAR_EMOJI)
