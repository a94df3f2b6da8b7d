class ClassificationError(Exception):
    """Raised when a content-safety classification fails."""


class ClassificationNetworkError(ClassificationError):
    """Raised when the classifier call fails due to network/infrastructure issues."""
