# coworker/domain/exceptions.py

"""
Custom exceptions for the application.

This module defines application-specific exceptions that carry
meaningful error messages, HTTP status codes and an internal code
that clients can rely on.
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class ConfigurationException(Exception):
    """
    Invalid configuration detected while building a component.

    Raised at startup (never while serving a request) and never recovered.
    """


class CoworkerException(HTTPException):
    """
    Base exception for all Coworker API exceptions.
    Extends FastAPI's HTTPException to provide additional context.
    """

    def __init__(
            self,
            status_code: int,
            detail: Any = None,
            headers: Optional[Dict[str, Any]] = None,
            internal_code: Optional[str] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.internal_code = internal_code


class ResourceNotFoundException(CoworkerException):
    """Resource not found."""

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_NOT_FOUND"
        )


class ResourceAlreadyExistsException(CoworkerException):
    """Resource already exists (unique violation)."""

    def __init__(self, detail: str = "Resource already exists", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_ALREADY_EXISTS"
        )


class InvalidCredentialsException(CoworkerException):
    """Invalid login credentials."""

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            internal_code="INVALID_CREDENTIALS"
        )


class DatabaseOperationException(CoworkerException):
    """Error while running a database operation."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{detail}{error_info}",
            internal_code="DATABASE_OPERATION_ERROR"
        )


class InvalidInputException(CoworkerException):
    """Invalid input data."""

    def __init__(self, detail: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        field_errors = ""
        if fields:
            field_errors = ": " + ", ".join([f"{field}: {error}" for field, error in fields.items()])

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{detail}{field_errors}",
            internal_code="INVALID_INPUT"
        )


########################################################################
# Authentication
########################################################################

class AuthenticationException(CoworkerException):
    """
    Base class for every authorization failure on a protected route.

    All subclasses map to 401; only the internal code tells them apart.
    """

    def __init__(
            self,
            detail: str,
            internal_code: str,
            headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers=headers,
            internal_code=internal_code,
        )


class CredentialMissingException(AuthenticationException):
    """No credential was presented."""

    def __init__(self, detail: str = "credential is not provided", headers: Optional[Dict[str, Any]] = None):
        super().__init__(detail=detail, internal_code="CREDENTIAL_MISSING", headers=headers)


class CredentialMalformedException(AuthenticationException):
    """The credential could not be parsed (format, scheme or UUID)."""

    def __init__(self, detail: str = "credential is malformed", headers: Optional[Dict[str, Any]] = None):
        super().__init__(detail=detail, internal_code="CREDENTIAL_MALFORMED", headers=headers)


class InvalidTokenException(AuthenticationException):
    """Token failed verification, or the session does not exist."""

    def __init__(self, detail: str = "token is invalid", headers: Optional[Dict[str, Any]] = None):
        super().__init__(detail=detail, internal_code="INVALID_TOKEN", headers=headers)


class ExpiredTokenException(AuthenticationException):
    """Token is authentic but past its expiry."""

    def __init__(self, detail: str = "token has expired", headers: Optional[Dict[str, Any]] = None):
        super().__init__(detail=detail, internal_code="EXPIRED_TOKEN", headers=headers)


class TokenIssueException(CoworkerException):
    """Token could not be produced (key or algorithm misconfiguration)."""

    def __init__(self, detail: str = "Error issuing token", original_error: Optional[Exception] = None):
        error_info = f": {type(original_error).__name__}" if original_error else ""
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{detail}{error_info}",
            internal_code="TOKEN_ISSUE_ERROR"
        )
