"""Errors raised by the account model."""


class ValidationError(ValueError):
    """Raised when signup input breaks a length, format or uniqueness rule.

    ``errors`` maps each offending field name to a message suitable for
    showing next to that field in a form.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{field}: {message}" for field, message in self.errors.items()))
