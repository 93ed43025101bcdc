# Record types passed between the repositories and the GUI panels

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

@dataclass
class Product:
    id: int
    name: str
    price: Decimal

@dataclass
class User:
    id: int
    username: str
    password: str

class ErrorKind(Enum):
    CONNECTION = "connection"
    CONSTRAINT = "constraint"
    STATEMENT = "statement"
    NOT_FOUND = "not_found"

@dataclass
class Result:
    """
    Outcome of one repository call.
    Truthy on success so callers can still write `if repo.create(...):`.
    """
    ok: bool
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    def __bool__(self):
        return self.ok

    @classmethod
    def success(cls, value=None):
        return cls(True, value)

    @classmethod
    def failure(cls, error, message="", value=None):
        return cls(False, value, error, message)
