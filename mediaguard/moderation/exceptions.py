class ModerationError(Exception):
    """Raised when the moderation pipeline is wired or sequenced incorrectly."""
