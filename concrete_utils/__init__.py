"""Foundational utilities: integer math, byte order, scope guards,
type-dispatched customization points, intrusive reference counting,
data-defined status codes and UUID values."""

__version__ = "0.0.12"

__all__ = [
    "bit",
    "intrusive_ptr",
    "math_supplement",
    "misc",
    "pack_utils",
    "scope_guard",
    "status_domain",
    "tag_invoke",
    "utils",
    "uuid_rng",
    "uuid_value",
]