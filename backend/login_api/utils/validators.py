from email_validator import EmailNotValidError, validate_email


class EmailValidator:
    """Syntax-only email check, same library pydantic's EmailStr uses."""

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
