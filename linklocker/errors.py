"""Error types raised by the link service."""


class LinkLockerError(ValueError):
    """Base class for rejected link operations."""


class InvalidTargetError(LinkLockerError):
    """Target is missing, not a string, or empty."""

    def __init__(self, message: str = "target required"):
        super().__init__(message)


class InvalidCodeError(LinkLockerError):
    """Caller-supplied short code has an unusable format."""


class DuplicateCodeError(LinkLockerError):
    """Caller-supplied short code is already mapped."""

    def __init__(self, code: str):
        super().__init__(f"Short code '{code}' already exists")
        self.code = code
