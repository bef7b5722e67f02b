"""Smart pointers for objects that keep their own reference count.

An object takes part when it offers ``add_reference()`` and ``release()``
methods (and optionally ``reference_count()``), or when a
:class:`ReferenceCountedTraits` instance has been registered for its class.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any


class ReferenceCountedTraits:
    """How to add, drop and inspect references of a reference-counted object.

    The base implementation calls the object's own ``add_reference()``,
    ``release()`` and ``reference_count()`` methods. Subclass it and
    register it with :func:`register_traits` for classes using other names.
    """

    def add_reference(self, obj: Any) -> None:
        obj.add_reference()

    def release(self, obj: Any) -> None:
        obj.release()

    def reference_count(self, obj: Any) -> Any:
        counter = getattr(obj, "reference_count", None)
        if not callable(counter):
            raise TypeError(
                f"{type(obj).__name__} does not expose its reference count"
            )
        return counter()


_DEFAULT_TRAITS = ReferenceCountedTraits()
_registry: dict[type, ReferenceCountedTraits] = {}


def register_traits(cls: type, traits: ReferenceCountedTraits) -> None:
    """Use ``traits`` for instances of ``cls`` and its subclasses."""
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got {type(cls).__name__}")
    if not (callable(getattr(traits, "add_reference", None))
            and callable(getattr(traits, "release", None))):
        raise TypeError("traits must provide add_reference() and release()")
    _registry[cls] = traits


def traits_for(obj: Any) -> ReferenceCountedTraits:
    """Return the traits governing ``obj``; raise TypeError if there are none."""
    for klass in type(obj).__mro__:
        traits = _registry.get(klass)
        if traits is not None:
            return traits
    if callable(getattr(obj, "add_reference", None)) and callable(
        getattr(obj, "release", None)
    ):
        return _DEFAULT_TRAITS
    raise TypeError(f"{type(obj).__name__} is not reference counted")


class IntrusivePtr:
    """Owns one reference of a reference-counted object, or nothing.

    The reference is dropped by :meth:`close`, on leaving a ``with`` block,
    or when the pointer itself is collected.
    """

    __slots__ = ("_obj", "_traits")

    def __init__(self) -> None:
        self._obj: Any = None
        self._traits: ReferenceCountedTraits | None = None

    @classmethod
    def import_(cls, obj: Any) -> IntrusivePtr:
        """Take over an existing reference of ``obj`` without adding one."""
        ptr = cls()
        if obj is not None:
            ptr._traits = traits_for(obj)
            ptr._obj = obj
        return ptr

    @classmethod
    def acquire(cls, obj: Any) -> IntrusivePtr:
        """Track ``obj`` by adding a new reference to it."""
        ptr = cls()
        if obj is not None:
            traits = traits_for(obj)
            traits.add_reference(obj)
            ptr._traits = traits
            ptr._obj = obj
        return ptr

    def get(self) -> Any:
        """Return the tracked object, or None if empty."""
        return self._obj

    def get_handle(self) -> IntrusivePtr:
        """Return a new pointer sharing ownership of the tracked object."""
        return self.copy()

    def copy(self) -> IntrusivePtr:
        """Return a new pointer holding an additional reference."""
        duplicate = type(self)()
        if self._obj is not None:
            self._traits.add_reference(self._obj)
            duplicate._obj = self._obj
            duplicate._traits = self._traits
        return duplicate

    def move(self) -> IntrusivePtr:
        """Transfer the reference into a new pointer, leaving this one empty."""
        moved = type(self)()
        moved._obj, moved._traits = self._obj, self._traits
        self._obj = self._traits = None
        return moved

    def swap(self, other: IntrusivePtr) -> None:
        """Exchange the tracked objects of two pointers."""
        self._obj, other._obj = other._obj, self._obj
        self._traits, other._traits = other._traits, self._traits

    def reset(self, obj: Any) -> None:
        """Track ``obj`` (acquiring a reference) and drop the previous one."""
        replacement = IntrusivePtr.acquire(obj)
        old_obj, old_traits = self._obj, self._traits
        self._obj, self._traits = replacement._obj, replacement._traits
        replacement._obj = replacement._traits = None
        if old_obj is not None:
            old_traits.release(old_obj)

    def release(self) -> Any:
        """Return the tracked object and empty the pointer without dropping
        the reference."""
        obj = self._obj
        self._obj = self._traits = None
        return obj

    def close(self) -> None:
        """Drop the held reference, if any, and empty the pointer."""
        obj, traits = self._obj, self._traits
        if obj is not None:
            self._obj = self._traits = None
            traits.release(obj)

    def use_count(self) -> Any:
        """Same as :meth:`reference_count`."""
        return self.reference_count()

    def reference_count(self) -> Any:
        """Return the (approximate) reference count of the tracked object."""
        if self._obj is None:
            raise ValueError("empty pointer has no reference count")
        return self._traits.reference_count(self._obj)

    def __bool__(self) -> bool:
        return self._obj is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntrusivePtr):
            return NotImplemented
        return self._obj is other._obj

    def __hash__(self) -> int:
        return id(self._obj)

    def __enter__(self) -> IntrusivePtr:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_obj", None) is not None:
            self.close()

    def __repr__(self) -> str:
        return f"IntrusivePtr({self._obj!r})"


class AliasingPtr:
    """Points at ``target`` while keeping a reference on another object.

    The pointer is empty unless both a non-empty handle and a target are
    given. The handle passed in is copied, so the caller keeps its own.
    """

    __slots__ = ("_target", "_handle")

    def __init__(self, handle: IntrusivePtr | None = None, target: Any = None) -> None:
        self._target: Any = None
        self._handle = IntrusivePtr()
        if handle is not None and handle and target is not None:
            self._handle = handle.copy()
            self._target = target

    @classmethod
    def _adopt(cls, handle: IntrusivePtr, target: Any) -> AliasingPtr:
        ptr = cls()
        if handle and target is not None:
            ptr._handle = handle
            ptr._target = target
        else:
            handle.close()
        return ptr

    def get(self) -> Any:
        """Return the target, or None if empty."""
        return self._target

    def get_handle(self) -> IntrusivePtr:
        """Return the owning handle itself (not a copy)."""
        return self._handle

    def take_handle(self) -> IntrusivePtr:
        """Move the owning handle out, leaving this pointer empty."""
        handle = self._handle
        self._handle = IntrusivePtr()
        self._target = None
        return handle

    def copy(self) -> AliasingPtr:
        """Return a new aliasing pointer holding an additional reference."""
        return type(self)._adopt(self._handle.copy(), self._target)

    def move(self) -> AliasingPtr:
        """Transfer ownership into a new pointer, leaving this one empty."""
        target = self._target
        return type(self)._adopt(self.take_handle(), target)

    def close(self) -> None:
        """Drop the held reference and empty the pointer."""
        self._target = None
        self._handle.close()

    def use_count(self) -> Any:
        """Same as :meth:`reference_count`."""
        return self._handle.use_count()

    def reference_count(self) -> Any:
        """Return the reference count of the owning object."""
        return self._handle.reference_count()

    def __bool__(self) -> bool:
        return self._target is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AliasingPtr):
            return NotImplemented
        return self._target is other._target and self._handle == other._handle

    def __hash__(self) -> int:
        return hash((id(self._target), hash(self._handle)))

    def __enter__(self) -> AliasingPtr:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AliasingPtr({self._handle!r}, {self._target!r})"


def intrusive_ptr_import(obj: Any) -> IntrusivePtr:
    """Track ``obj`` taking over an existing reference."""
    return IntrusivePtr.import_(obj)


def intrusive_ptr_acquire(obj: Any) -> IntrusivePtr:
    """Track ``obj`` adding a new reference."""
    return IntrusivePtr.acquire(obj)


def _check_pointer(ptr: Any) -> None:
    if not isinstance(ptr, (IntrusivePtr, AliasingPtr)):
        raise TypeError(f"expected a pointer, got {type(ptr).__name__}")


def static_pointer_cast(ptr: IntrusivePtr | AliasingPtr, consume: bool = False):
    """Return a pointer of the same kind to the same object.

    With ``consume`` the ownership moves out of ``ptr``; otherwise a new
    reference is added.
    """
    _check_pointer(ptr)
    return ptr.move() if consume else ptr.copy()


def dynamic_pointer_cast(
    ptr: IntrusivePtr | AliasingPtr, cls: type, consume: bool = False
):
    """Like :func:`static_pointer_cast` if the pointee is a ``cls`` instance,
    otherwise return an empty pointer.

    With ``consume`` the source is always emptied; on a mismatch its
    reference is dropped.
    """
    _check_pointer(ptr)
    target = ptr.get()
    if target is not None and isinstance(target, cls):
        return static_pointer_cast(ptr, consume)
    if consume:
        ptr.close()
    return type(ptr)()