class InvariantViolation(Exception):
    """Raised when content breaks a domain rule on the write path."""
