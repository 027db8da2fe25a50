# octype

A small object model for Python. It gives you a registry of named types, a
base class `OCType` that carries a type id, a retain count and a
static-instance flag, and helper functions for type-aware equality,
descriptions and reference counting. Everything lives in `octype.core`.

## Installation

```
pip install octype
```

## Registering types

Type names map to ids starting at 1. Registering a name twice gives back the
same id. The shared registry holds at most 256 names (`DEFAULT_CAPACITY`).

```python
from octype.core import register_type

tid = register_type("MyType")
assert tid == register_type("MyType")
```

`register_type` raises `TypeError` when the name is not a string and
`ValueError` when the registry is full. `cleanup_type_table()` empties the
shared registry.

For a table of your own, create a `TypeRegistry(capacity)`. It offers
`register(name)`, `name_of(type_id)` (the name, or `None` for an unknown id),
`len()`, `type_id in registry` and `clear()`.

The id `0` (`NOT_A_TYPE_ID`) means "not a type". `NOT_FOUND` is `-1`.

## Objects

Subclass `OCType`. A new object has a retain count of 1. Override `equal` to
compare two objects of the same type (the base compares identity),
`formatting_desc` to describe an object (the base returns the type name),
and `finalize` to run cleanup when the last reference is released (the base
sets the retain count to 0).

```python
from octype.core import (
    OCType, register_type, retain, release, get_retain_count,
    type_equal, copy_description, copy_formatting_desc, get_type_id,
)

POINT = register_type("Point")

class Point(OCType):
    def __init__(self, x, y):
        super().__init__(POINT, False)
        self.x, self.y = x, y

    def equal(self, other):
        return (self.x, self.y) == (other.x, other.y)

    def formatting_desc(self):
        return f"({self.x}, {self.y})"

p = Point(1, 2)
retain(p)
assert get_retain_count(p) == 2
release(p)
assert get_retain_count(p) == 1

assert type_equal(p, Point(1, 2))
assert get_type_id(p) == POINT
assert copy_description(p) == "Point"
assert copy_formatting_desc(p) == "(1, 2)"
```

## Helper functions

- `type_equal(a, b)`: false if either is `None`; true if they are the same
  object; otherwise true only when both have a valid, matching type id and
  `a.equal(b)` is true.
- `retain(obj)` / `release(obj)`: raise or lower the retain count. Releasing
  the last reference calls `finalize`. Both accept `None` and do nothing.
- `get_retain_count(obj)`: the count, or 0 for `None`.
- `get_type_id(obj)`: the id, or `NOT_A_TYPE_ID` when the object is `None`
  or its id is not in the shared registry.
- `copy_description(obj)`: the registered type name, `"NULL"` for `None`, or
  `"UnknownType"` for an unregistered id.
- `copy_formatting_desc(obj)`: the object's `formatting_desc()`, or `None`.
- `set_static_instance(obj, flag)` / `get_static_instance(obj)`: mark or
  query an object as static. Marking resets the retain count to 1; static
  objects ignore `retain` and `release`.

## What it does not do

The package provides only the base object model. It has no concrete value
types such as strings, numbers, booleans, arrays or dictionaries, and no
autorelease pool; those are left for you to build on `OCType`.