# coworker/domain/__init__.py

"""
Main module for the application's domain components.

This module exports the domain exceptions for easy importing.
"""

from coworker.domain.exceptions import (
    ConfigurationException,
    CoworkerException,
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    InvalidCredentialsException,
    DatabaseOperationException,
    InvalidInputException,
    AuthenticationException,
    CredentialMissingException,
    CredentialMalformedException,
    InvalidTokenException,
    ExpiredTokenException,
    TokenIssueException,
)
