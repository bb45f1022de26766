# coworker/shared/utils/input_validation.py

import re
from typing import Optional, Tuple


class InputValidator:
    """
    Validation of user input beyond what Pydantic checks.
    """

    MAX_NAME_LENGTH = 100
    MIN_PASSWORD_LENGTH = 14
    MAX_PASSWORD_LENGTH = 72  # bcrypt only hashes the first 72 bytes

    # Letters only, any script: no spaces, digits, punctuation or symbols
    PERSON_NAME_PATTERN = re.compile(r'[^\W\d_]+')

    @classmethod
    def validate_person_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a user's first or last name.

        Args:
            name: String to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not name:
            return False, "Name cannot be empty"

        if len(name) > cls.MAX_NAME_LENGTH:
            return False, f"Name is too long (maximum {cls.MAX_NAME_LENGTH} characters)"

        if not cls.PERSON_NAME_PATTERN.fullmatch(name):
            return False, "Name must contain letters only"

        return True, None

    @classmethod
    def validate_password(cls, password: str) -> Tuple[bool, Optional[str]]:
        if not password:
            return False, "Password cannot be empty"

        if len(password) < cls.MIN_PASSWORD_LENGTH:
            return False, f"Password must be at least {cls.MIN_PASSWORD_LENGTH} characters"

        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_LENGTH:
            return False, f"Password is too long (maximum {cls.MAX_PASSWORD_LENGTH} bytes)"

        return True, None
