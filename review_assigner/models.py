from dataclasses import dataclass, field
from enum import Enum
from typing import Any


SINGLE_POOL_MIN_SIZE = 2


class PoolMode(Enum):
    SINGLE = "single"
    DUAL = "dual"


class ReviewAssignerError(Exception):
    """Base exception for the review assigner."""
    pass


class ValidationError(ReviewAssignerError):
    """Input violates an assignment precondition.

    ``employee_ids`` holds the ids involved in the failure, if any.
    """

    def __init__(self, message: str, employee_ids: tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.employee_ids = tuple(employee_ids)


class FileError(ReviewAssignerError):
    """File operation failed."""
    pass


def scalar_to_str(value: Any) -> Any:
    """Convert int/float values to str, leaving everything else for validation."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


@dataclass(frozen=True)
class Person:
    """A person identified by ``employee_id``.

    Equality and hashing only look at ``employee_id``; two records with the
    same id are the same person whatever their names say.
    """
    name: str = field(compare=False)
    employee_id: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValidationError(f"Person name must be a string, got {self.name!r}")
        if not self.name.strip():
            raise ValidationError("Person name must not be empty")
        if not isinstance(self.employee_id, str):
            raise ValidationError(
                f"Person '{self.name.strip()}' employeeId must be a string, got {self.employee_id!r}"
            )
        if not self.employee_id.strip():
            raise ValidationError(f"Person '{self.name.strip()}' has an empty employeeId")
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "employee_id", self.employee_id.strip())

    def __str__(self) -> str:
        return f"{self.name}({self.employee_id})"

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Person":
        """Build a Person from a pool entry; numeric names and ids become strings."""
        return Person(
            name=scalar_to_str(data.get("name")),
            employee_id=scalar_to_str(data.get("employeeId"))
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "employeeId": self.employee_id
        }


Pool = list[Person]
Assignment = dict[Person, list[Person]]
