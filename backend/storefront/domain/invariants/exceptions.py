class InvariantViolation(Exception):
    """A store design broke one of its structural rules."""
