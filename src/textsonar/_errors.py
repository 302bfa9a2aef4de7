"""textsonar error types."""


class SonarError(Exception):
    """Base error for all textsonar failures."""


class InvalidInputError(SonarError, TypeError):
    """Text argument was None or not a str."""


class SonarVersionError(SonarError):
    """Extension data version mismatch."""


class SonarChecksumError(SonarError):
    """File checksum verification failed."""


class SonarDataError(SonarError):
    """Extension data is structurally invalid."""


def require_text(text: object, name: str = "text") -> str:
    if not isinstance(text, str):
        raise InvalidInputError(
            f"{name} must be a str, got {type(text).__name__}"
        )
    return text
