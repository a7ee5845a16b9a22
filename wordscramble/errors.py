class WordScrambleError(Exception):
    """Base class for errors raised by the word scramble service."""


class WordListUnavailable(WordScrambleError):
    """The start word list could not be loaded; no root word can be produced."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load start words from {path}: {reason}")


class UnknownSession(WordScrambleError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Unknown session: {session_id}")


class TooManySessions(WordScrambleError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Session limit reached ({limit})")
