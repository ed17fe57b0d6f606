"""Error Hierarchy: typed, categorized exceptions for every user-registry failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - InvalidArgumentError and its subclasses map to 400 with the message as body
    - Messages are stable, user-facing text (clients match on them)

Design Decisions:
    - Single hierarchy with UserRegistryError base: one global handler catches all
    - Subclasses of InvalidArgumentError keep a specific code for logs while sharing the 400 mapping
"""

from user_registry.core.domain_types import ErrorCategory, ErrorSeverity


class UserRegistryError(Exception):
    """Base exception for all user-registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {"error_code": self.code, "status_code": self.http_status}


# ─── Invalid Argument (400-level) ───────────────────────────────

class InvalidArgumentError(UserRegistryError):
    """Request is well-formed but violates a domain rule."""
    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.WARNING, 400,
        )


class UnderageUserError(InvalidArgumentError):
    """User's completed-years age is below the configured minimum."""
    def __init__(self, min_age: int):
        super().__init__(
            f"User must be at least {min_age} years old",
            "USER_UNDERAGE", ErrorCategory.BUSINESS_RULE,
        )
        self.min_age = min_age


class UserNotFoundError(InvalidArgumentError):
    """No stored user has the requested id."""
    def __init__(self, user_id: int):
        super().__init__(
            "User not found", "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
        )
        self.user_id = user_id


class EmailNotFoundError(InvalidArgumentError):
    """No stored user has the requested email."""
    def __init__(self, email: str):
        super().__init__(
            f"User with email: {email} doesn't exists",
            "EMAIL_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
        )
        self.email = email


class InvalidDateRangeError(InvalidArgumentError):
    """Birth-date range query where from_date is not strictly before to_date."""
    def __init__(self):
        super().__init__("Wrong date range", "INVALID_DATE_RANGE")
