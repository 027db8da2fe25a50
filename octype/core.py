"""Type registry, reference counting and introspection for OCType objects."""

from __future__ import annotations

from typing import Optional

NOT_A_TYPE_ID = 0
"""Type ID that marks an invalid or unregistered type."""

NOT_FOUND = -1
"""Value returned by searches that find nothing."""

DEFAULT_CAPACITY = 256
"""Number of type names the shared registry can hold."""

UINT32_MAX = 2**32 - 1
"""Largest value a retain count can reach."""


class TypeRegistry:
    """Maps type names to small positive integer IDs, starting at 1."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._names: list[str] = []
        self._ids: dict[str, int] = {}

    def register(self, type_name: str) -> int:
        """Return the ID for ``type_name``, registering it if it is new.

        Raises TypeError when the name is not a string and ValueError when
        the registry is full.
        """
        if not isinstance(type_name, str):
            raise TypeError("type name must be a string")
        existing = self._ids.get(type_name)
        if existing is not None:
            return existing
        if len(self._names) >= self.capacity:
            raise ValueError(
                f"type registry is full ({self.capacity} types); "
                f"cannot register {type_name!r}"
            )
        self._names.append(type_name)
        type_id = len(self._names)
        self._ids[type_name] = type_id
        return type_id

    def name_of(self, type_id: int) -> Optional[str]:
        """Return the name registered under ``type_id``, or None."""
        if type_id not in self:
            return None
        return self._names[type_id - 1]

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, type_id: object) -> bool:
        return isinstance(type_id, int) and 1 <= type_id <= len(self._names)

    def clear(self) -> None:
        """Forget every registered type."""
        self._names.clear()
        self._ids.clear()


_registry = TypeRegistry(DEFAULT_CAPACITY)


class OCType:
    """Base for reference-counted objects that carry a registered type ID."""

    def __init__(self, type_id: int = NOT_A_TYPE_ID, static_instance: bool = False) -> None:
        self.type_id = type_id
        self.retain_count = 1
        self.static_instance = static_instance

    def finalize(self) -> None:
        """Called when the last reference is released; drops the count to zero."""
        self.retain_count = 0

    def equal(self, other: "OCType") -> bool:
        """Compare with another object of the same type; the base uses identity."""
        return self is other

    def formatting_desc(self) -> str:
        """Return a textual description of this object."""
        return copy_description(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type_id={self.type_id}, "
            f"retain_count={self.retain_count}, "
            f"static_instance={self.static_instance})"
        )


def register_type(type_name: str) -> int:
    """Register ``type_name`` in the shared registry and return its ID."""
    return _registry.register(type_name)


def cleanup_type_table() -> None:
    """Empty the shared type registry."""
    _registry.clear()


def type_equal(first: Optional[OCType], second: Optional[OCType]) -> bool:
    """Return True when both objects exist, share a valid type and compare equal."""
    if first is None or second is None:
        return False
    if first is second:
        return True
    if (
        first.type_id == NOT_A_TYPE_ID
        or second.type_id == NOT_A_TYPE_ID
        or first.type_id != second.type_id
    ):
        return False
    return bool(first.equal(second))


def retain(obj: Optional[OCType]) -> Optional[OCType]:
    """Increment the retain count of ``obj`` and return it."""
    if obj is None:
        return None
    if obj.static_instance:
        return obj
    if obj.retain_count >= UINT32_MAX:
        return obj
    obj.retain_count += 1
    return obj


def release(obj: Optional[OCType]) -> None:
    """Decrement the retain count of ``obj``, finalizing it at the last reference."""
    if obj is None or obj.static_instance:
        return
    if obj.retain_count < 1:
        obj.retain_count = 0
        return
    if obj.retain_count == 1:
        obj.finalize()
        return
    obj.retain_count -= 1


def copy_formatting_desc(obj: Optional[OCType]) -> Optional[str]:
    """Return the object's own formatted description, or None for no object."""
    if obj is None:
        return None
    return obj.formatting_desc()


def copy_description(obj: Optional[OCType]) -> str:
    """Return the registered type name of ``obj``."""
    if obj is None:
        return "NULL"
    type_id = obj.type_id
    if type_id == NOT_A_TYPE_ID or type_id not in _registry:
        return "UnknownType"
    name = _registry.name_of(type_id)
    if name is None:
        return "UnnamedType"
    return name


def get_type_id(obj: Optional[OCType]) -> int:
    """Return the type ID of ``obj``, or NOT_A_TYPE_ID when it is not registered."""
    if obj is None:
        return NOT_A_TYPE_ID
    if obj.type_id == NOT_A_TYPE_ID or obj.type_id not in _registry:
        return NOT_A_TYPE_ID
    return obj.type_id


def get_retain_count(obj: Optional[OCType]) -> int:
    """Return the retain count of ``obj``, or 0 for no object."""
    if obj is None:
        return 0
    return obj.retain_count


def get_static_instance(obj: Optional[OCType]) -> bool:
    """Return whether ``obj`` is a static instance."""
    if obj is None:
        return False
    return obj.static_instance


def set_static_instance(obj: Optional[OCType], static_instance: bool) -> None:
    """Mark ``obj`` as static or not and reset its retain count to 1."""
    if obj is None:
        return
    obj.retain_count = 1
    obj.static_instance = static_instance