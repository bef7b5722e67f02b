"""Status code domains defined by a table of value descriptors."""

from __future__ import annotations

import errno
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Errc(Enum):
    """Generic, platform-independent error conditions."""

    UNKNOWN = -1
    SUCCESS = 0
    OPERATION_NOT_PERMITTED = errno.EPERM
    NO_SUCH_FILE_OR_DIRECTORY = errno.ENOENT
    NO_SUCH_PROCESS = errno.ESRCH
    INTERRUPTED = errno.EINTR
    IO_ERROR = errno.EIO
    NO_SUCH_DEVICE_OR_ADDRESS = errno.ENXIO
    ARGUMENT_LIST_TOO_LONG = errno.E2BIG
    EXECUTABLE_FORMAT_ERROR = errno.ENOEXEC
    BAD_FILE_DESCRIPTOR = errno.EBADF
    NO_CHILD_PROCESS = errno.ECHILD
    RESOURCE_UNAVAILABLE_TRY_AGAIN = errno.EAGAIN
    NOT_ENOUGH_MEMORY = errno.ENOMEM
    PERMISSION_DENIED = errno.EACCES
    BAD_ADDRESS = errno.EFAULT
    DEVICE_OR_RESOURCE_BUSY = errno.EBUSY
    FILE_EXISTS = errno.EEXIST
    CROSS_DEVICE_LINK = errno.EXDEV
    NO_SUCH_DEVICE = errno.ENODEV
    NOT_A_DIRECTORY = errno.ENOTDIR
    IS_A_DIRECTORY = errno.EISDIR
    INVALID_ARGUMENT = errno.EINVAL
    TOO_MANY_FILES_OPEN_IN_SYSTEM = errno.ENFILE
    TOO_MANY_FILES_OPEN = errno.EMFILE
    INAPPROPRIATE_IO_CONTROL_OPERATION = errno.ENOTTY
    FILE_TOO_LARGE = errno.EFBIG
    NO_SPACE_ON_DEVICE = errno.ENOSPC
    INVALID_SEEK = errno.ESPIPE
    READ_ONLY_FILE_SYSTEM = errno.EROFS
    TOO_MANY_LINKS = errno.EMLINK
    BROKEN_PIPE = errno.EPIPE
    ARGUMENT_OUT_OF_DOMAIN = errno.EDOM
    RESULT_OUT_OF_RANGE = errno.ERANGE
    RESOURCE_DEADLOCK_WOULD_OCCUR = errno.EDEADLK
    FILENAME_TOO_LONG = errno.ENAMETOOLONG
    FUNCTION_NOT_SUPPORTED = errno.ENOSYS
    DIRECTORY_NOT_EMPTY = errno.ENOTEMPTY
    ADDRESS_IN_USE = errno.EADDRINUSE
    CONNECTION_ABORTED = errno.ECONNABORTED
    CONNECTION_RESET = errno.ECONNRESET
    NOT_CONNECTED = errno.ENOTCONN
    TIMED_OUT = errno.ETIMEDOUT
    CONNECTION_REFUSED = errno.ECONNREFUSED
    HOST_UNREACHABLE = errno.EHOSTUNREACH
    NETWORK_UNREACHABLE = errno.ENETUNREACH
    CONNECTION_ALREADY_IN_PROGRESS = errno.EALREADY
    OPERATION_IN_PROGRESS = errno.EINPROGRESS


@dataclass(frozen=True)
class StatusDescriptor:
    """One row of a domain table: a value, its generic equivalent and text."""

    value: Hashable
    equivalent: Errc
    description: str


_UNKNOWN_MESSAGE = "unknown error code value"


def _order_key(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class StatusDomain:
    """A status code domain whose semantics come from a descriptor table.

    The table must be non-empty and sorted by value. Values whose generic
    equivalent is :attr:`Errc.SUCCESS` are successes, all others failures.
    """

    def __init__(
        self, name: str, domain_id: str, values: Iterable[StatusDescriptor]
    ) -> None:
        descriptors = tuple(values)
        if not descriptors:
            raise ValueError("a status domain needs at least one value descriptor")
        keys = [_order_key(descriptor.value) for descriptor in descriptors]
        if any(current > following for current, following in zip(keys, keys[1:])):
            raise ValueError("status domain value descriptors must be sorted by value")

        self.name = name
        self.domain_id = domain_id
        self.values = descriptors
        self._by_value: dict[Hashable, StatusDescriptor] = {}
        for descriptor in descriptors:
            self._by_value.setdefault(descriptor.value, descriptor)
        self._success_values = frozenset(
            descriptor.value
            for descriptor in descriptors
            if descriptor.equivalent is Errc.SUCCESS
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusDomain):
            return NotImplemented
        return self.domain_id == other.domain_id

    def __hash__(self) -> int:
        return hash(self.domain_id)

    def __repr__(self) -> str:
        return f"StatusDomain({self.name!r}, {self.domain_id!r})"

    def failure(self, value: Hashable) -> bool:
        """Return True unless ``value`` maps to :attr:`Errc.SUCCESS`."""
        return value not in self._success_values

    def equivalent(self, value: Hashable, other: Any) -> bool:
        """Return True if ``value`` of this domain is equivalent to ``other``.

        ``other`` may be a :class:`StatusCode`, a generic :class:`Errc` or a
        plain value of this domain.
        """
        if isinstance(other, StatusCode):
            return other.domain == self and value == other.value
        if isinstance(other, Errc):
            descriptor = self._by_value.get(value)
            return descriptor is not None and descriptor.equivalent is other
        if isinstance(other, Hashable) and other in self._by_value:
            return value == other
        return False

    def generic_code(self, value: Hashable) -> Errc:
        """Return the generic equivalent of ``value``."""
        descriptor = self._by_value.get(value)
        return descriptor.equivalent if descriptor is not None else Errc.UNKNOWN

    def message(self, value: Hashable) -> str:
        """Return the description of ``value``."""
        descriptor = self._by_value.get(value)
        return descriptor.description if descriptor is not None else _UNKNOWN_MESSAGE

    def code(self, value: Hashable) -> StatusCode:
        """Wrap ``value`` into a status code of this domain."""
        return StatusCode(self, value)


@dataclass(frozen=True, eq=False)
class StatusCode:
    """A value tagged with the domain that gives it meaning."""

    domain: StatusDomain
    value: Hashable

    def success(self) -> bool:
        return not self.domain.failure(self.value)

    def failure(self) -> bool:
        return self.domain.failure(self.value)

    def message(self) -> str:
        return self.domain.message(self.value)

    def generic_code(self) -> Errc:
        return self.domain.generic_code(self.value)

    def throw_exception(self) -> None:
        """Raise a :class:`StatusError` carrying this code."""
        raise StatusError(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StatusCode):
            return self.domain.equivalent(self.value, other) or other.domain.equivalent(
                other.value, self
            )
        if self.domain.equivalent(self.value, other):
            return True
        if isinstance(other, Errc):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.domain, self.value))


class StatusError(Exception):
    """Raised for a failed :class:`StatusCode`."""

    def __init__(self, code: StatusCode) -> None:
        super().__init__(code.message())
        self.code = code