"""Canonical permission key - resource:action."""

from dataclasses import dataclass

from rolegate.domain.exceptions import ValidationError

SEPARATOR = ":"


@dataclass(frozen=True)
class PermissionKey:
    """Canonical identity of a permission."""

    resource: str
    action: str

    def __str__(self) -> str:
        return f"{self.resource}{SEPARATOR}{self.action}"

    @classmethod
    def parse(cls, key: str) -> "PermissionKey":
        """Parse 'resource:action'. Action is everything after the first separator."""
        resource, sep, action = key.partition(SEPARATOR)
        if not sep or not resource or not action:
            raise ValidationError(f"Invalid permission key: {key!r}")
        return cls(resource=resource, action=action)
