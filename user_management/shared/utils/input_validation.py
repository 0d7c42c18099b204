# user_management/shared/utils/input_validation.py

from typing import Optional, Tuple


class InputValidator:
    """
    Validation helpers for user input,
    complementing the Pydantic field constraints.
    """

    # Limits
    MAX_EMAIL_LENGTH = 200

    @classmethod
    def validate_email(cls, email: str) -> Tuple[bool, Optional[str]]:
        """
        Validate the length of an email address.

        The format itself is checked by ``EmailStr``.

        Args:
            email: Email to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not email:
            return False, "Email is required"

        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, f"Email is too long (maximum {cls.MAX_EMAIL_LENGTH} characters)"

        return True, None
