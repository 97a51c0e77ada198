"""
Identity tokens for tabs and panels.

A tab or panel is compared against others through a token. Callers either name
their tabs explicitly ("tab1", "tab2") or let the instance itself stand in as
its identity. An explicit id always wins over the instance.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class ExplicitId:
    """A caller-supplied string identifier, compared by value."""

    value: str

    def __str__(self) -> str:
        return self.value


class InstanceIdentity:
    """Identity derived from a concrete instance, compared by reference."""

    __slots__ = ("instance",)

    def __init__(self, instance: Any) -> None:
        self.instance = instance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstanceIdentity):
            return NotImplemented
        return self.instance is other.instance

    def __hash__(self) -> int:
        return id(self.instance)

    def __repr__(self) -> str:
        return f"InstanceIdentity({type(self.instance).__name__}@{id(self.instance):#x})"


Token = Union[ExplicitId, InstanceIdentity]


def resolve_token(instance: Any, explicit_id: Optional[str] = None) -> Optional[Token]:
    """
    Resolve the token for a tab or panel.

    Args:
        instance: The tab/panel object, or None if it does not exist yet
        explicit_id: Optional caller-supplied identifier

    Returns:
        An ExplicitId when a non-empty string id is given, otherwise an
        InstanceIdentity for the instance, or None when the instance is not
        available yet (callers must not register None).
    """
    if isinstance(explicit_id, str) and explicit_id:
        return ExplicitId(explicit_id)
    if instance is None:
        return None
    return InstanceIdentity(instance)


def as_token(value: Any) -> Optional[Token]:
    """Normalise a plain string, a token or an instance into a token.

    An empty string is not an id and normalises to None, like a missing value.
    """
    if value is None or value == "":
        return None
    if isinstance(value, (ExplicitId, InstanceIdentity)):
        return value
    if isinstance(value, str):
        return ExplicitId(value)
    return InstanceIdentity(value)
