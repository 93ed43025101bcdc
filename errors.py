"""Exceptions for simplecrud."""


class SimpleCrudError(Exception):
    """Base exception for all simplecrud errors."""

    pass


class ConfigError(SimpleCrudError):
    """Raised when config.json cannot be read or holds bad values."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config file {path}: {reason}")


class DatabaseConnectionError(SimpleCrudError, ConnectionError):
    """Raised when the database server is unreachable or rejects the login."""

    def __init__(self, host, database, reason=None):
        self.host = host
        self.database = database
        msg = f"Cannot connect to database '{database}' on {host}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ValidationError(SimpleCrudError):
    """Raised when form input is rejected before reaching the database."""

    def __init__(self, field, message):
        self.field = field
        super().__init__(message)
