class CursorError(Exception):
    pass


class InvalidInput(CursorError, ValueError):
    """Raised at construction for a bad base sequence or an out-of-range arity."""


class EndOfSequence(CursorError, LookupError):
    """Raised by next()/previous() when the cursor cannot move in that direction."""
