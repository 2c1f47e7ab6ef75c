from src.platform.exception.exceptions import (
    ApiError,
    AuthenticationError,
    ConflictError,
    CustomBaseError,
    DomainError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    ValidationError,
)


GENERIC_ERROR_MESSAGE = 'Something went wrong. Please try again.'

# Remote failures surface a fixed message; the underlying cause is only logged
USER_MESSAGES: dict[type[CustomBaseError], str] = {
    NetworkError: 'Could not reach the server. Check your connection and try again.',
    AuthenticationError: 'Invalid credentials or expired session. Please sign in again.',
    ForbiddenError: 'You do not have permission to perform this action.',
    NotFoundError: 'The requested item no longer exists. The list has been refreshed.',
    ConflictError: 'That seat was just taken. Please choose another one.',
    ApiError: GENERIC_ERROR_MESSAGE,
}

# Locally raised errors carry a message written for the user
LOCAL_ERRORS: tuple[type[CustomBaseError], ...] = (DomainError, ValidationError)


def to_user_message(exc: Exception) -> str:
    if isinstance(exc, LOCAL_ERRORS):
        return exc.message  # type: ignore[attr-defined]
    for error_type in type(exc).__mro__:
        if error_type in USER_MESSAGES:
            return USER_MESSAGES[error_type]  # type: ignore[index]
    return GENERIC_ERROR_MESSAGE
