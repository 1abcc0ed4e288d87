class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateError(ValidationError):
    """Raised when a creation would break a uniqueness rule."""


class DuplicateEmailError(DuplicateError):
    def __init__(self, message: str = "An account with this email already exists."):
        super().__init__(message)


class DuplicateStudentIdError(DuplicateError):
    def __init__(self, message: str = "A student with this ID already exists."):
        super().__init__(message)


class DuplicateTeacherIdError(DuplicateError):
    def __init__(self, message: str = "A teacher with this ID already exists."):
        super().__init__(message)


class InvalidMarksError(ValidationError):
    """Raised when a mark falls outside the accepted range."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class RoleMismatchError(AuthorizationError):
    """Raised when an account is narrowed to a role it does not have."""


class StoreCorruptError(DomainError):
    """Raised internally when the persisted document fails structural checks."""
