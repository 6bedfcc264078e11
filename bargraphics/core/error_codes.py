"""
Structured error keys for layout elements that are skipped rather than drawn.
Use these keys in log lines and export warnings; map to user-facing messages.
"""

# Known error keys
INVALID_POSITION = "invalid_position"
ILLEGIBLE_LABEL = "illegible_label"
DEGENERATE_GEOMETRY = "degenerate_geometry"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_POSITION: "Position is neither a compass keyword nor an 'x,y' pair; label left unadjusted.",
    ILLEGIBLE_LABEL: "Label would shrink below 20% of its size to fit; it was not drawn.",
    DEGENERATE_GEOMETRY: "Bar layout needs at least one bar.",
}


def user_message(error_key: str | None, fallback: str = "Element skipped.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
