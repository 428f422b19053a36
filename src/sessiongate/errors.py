from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class AuthenticationError(UserError):
    """Raised when a request carries no usable session."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when a login attempt matches no principal.

    The message never says whether the identifier or the secret was wrong.
    """

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class SessionExpiredError(UserError):
    """Raised when a session disappears after the request was admitted."""

    def __init__(self, message: str = "Session expired or invalid.") -> None:
        super().__init__(message)


class CredentialStoreError(Exception):
    """Raised when the credential store cannot answer a lookup.

    Not a UserError: the message may carry backend details and is never shown.
    """
