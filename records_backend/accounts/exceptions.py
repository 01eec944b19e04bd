# accounts/exceptions.py


class AccountError(Exception):
    """Base class for errors raised by account derived operations."""


class ParseError(AccountError, ValueError):
    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class MissingFieldError(AccountError):
    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__(f"missing required field(s): {', '.join(self.fields)}")
