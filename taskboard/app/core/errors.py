class InvalidInput(Exception):
    """Raised when a request carries an empty description or a malformed id."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
