"""Pure field checks run before a User row is built.

Each check returns an error message, or None when the value is acceptable.
"""

from email_validator import EmailNotValidError, validate_email

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 30
EMAIL_MIN_LENGTH = 3
EMAIL_MAX_LENGTH = 256


def is_email(value: str) -> bool:
    # Special-use domains (.test, .local, .localhost, ...) are not emails here:
    # such addresses are refused as emails and allowed as usernames.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def check_username(username: str | None) -> str | None:
    if not username:
        return 'Username is required.'
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return f'Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters.'
    if is_email(username):
        return 'Username cannot be an email.'
    return None


def check_email(email: str | None) -> str | None:
    if not email:
        return 'Email is required.'
    if not EMAIL_MIN_LENGTH <= len(email) <= EMAIL_MAX_LENGTH:
        return f'Email must be between {EMAIL_MIN_LENGTH} and {EMAIL_MAX_LENGTH} characters.'
    if not is_email(email):
        return 'Please provide a valid email.'
    return None


def check_password_provided(password: str | None) -> str | None:
    if not password:
        return 'Password is required.'
    return None


def validate_signup(username: str | None, email: str | None, password: str | None) -> dict[str, str]:
    checks = {
        'username': check_username(username),
        'email': check_email(email),
        'password': check_password_provided(password),
    }
    return {field: message for field, message in checks.items() if message}
