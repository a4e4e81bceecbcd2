class NotAuthenticatedError(Exception):
    """Raised when an operation needs a signed-in user and there is none."""
