# lazy_image/errors.py
# Responsibility: Exception hierarchy for the image candidate resolution package.


class LazyImageError(Exception):
    """Base exception for lazy_image."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR", context: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = context or {}


class EmptyCandidateSetError(LazyImageError, ValueError):
    """
    Raised when best-candidate selection is requested for zero candidates.
    The builder never produces an empty set, so this is always a caller bug.
    """

    def __init__(self, message: str = "Cannot select a best candidate from an empty candidate set",
                 context: dict = None):
        super().__init__(message, "EMPTY_CANDIDATE_SET", context)
