"""
Error taxonomy for zip code lookups and dataset loading.
"""


class ZipcodeError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(ZipcodeError, ValueError):
    """The caller passed a zip code or prefix that failed validation."""


class InvalidType(ValidationError, TypeError):
    def __init__(self, value: object) -> None:
        super().__init__(
            f"Invalid type, zipcode must be a string, got {type(value).__name__}."
        )


class InvalidCharacters(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(
            f'Invalid characters, zipcode may only contain digits and "-": {value!r}'
        )


class InvalidFormat(ValidationError):
    def __init__(self, value: str, expected: str = '"#####" or "#####-####"') -> None:
        super().__init__(
            f"Invalid format, zipcode must be of the format: {expected}: {value!r}"
        )


class DataCorruption(ZipcodeError, RuntimeError):
    """The packaged dataset could not be deserialized."""
