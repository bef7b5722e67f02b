# concrete-utils

A collection of small, dependency-free building blocks for Python code that
works close to binary data or wants explicit control over resource lifetimes.

## What is inside

| Module | Contents |
| --- | --- |
| `concrete_utils.math_supplement` | `div_ceil`, `round_up`, `round_up_p2`, `round_down`, `round_down_p2`, `mod`, `upow` |
| `concrete_utils.bit` | `Endian`, `byteswap`, `endian_store`, `endian_load` |
| `concrete_utils.utils` | `unreachable`, `to_underlying`, `is_null_byte`, `is_non_null_byte` |
| `concrete_utils.misc` | `make_byte_array`, `sequence_init` |
| `concrete_utils.pack_utils` | `nth_param` |
| `concrete_utils.scope_guard` | `ScopeExit`, `ScopeGuard`, `ExceptionScopeGuard` |
| `concrete_utils.tag_invoke` | `CustomizationPoint`, `tag_invoke`, `tag_invocable` |
| `concrete_utils.status_domain` | `Errc`, `StatusDescriptor`, `StatusDomain`, `StatusCode`, `StatusError` |
| `concrete_utils.intrusive_ptr` | `IntrusivePtr`, `AliasingPtr`, `ReferenceCountedTraits`, `register_traits`, `traits_for`, `intrusive_ptr_import`, `intrusive_ptr_acquire`, `static_pointer_cast`, `dynamic_pointer_cast` |
| `concrete_utils.uuid_value` | `Uuid`, `UuidVariant`, `UuidVersion`, `format_uuid` |
| `concrete_utils.uuid_rng` | `RandomUuidV4Generator` |

## Installation

```
pip install concrete-utils
```

The package needs Python 3.10 or later and has no runtime dependencies.

## Examples

Integer helpers that round the way you expect:

```python
from concrete_utils.math_supplement import div_ceil, mod, round_up, upow

div_ceil(8, 7)     # 2
div_ceil(-6, 7)    # 0
mod(-1, 5)         # 4
round_up(-6, 5)    # -5
upow(2, 64)        # 0 (wraps around at 64 bits)
```

Byte order conversion for 1, 2, 4 and 8 byte integers:

```python
from concrete_utils.bit import Endian, byteswap, endian_load, endian_store

byteswap(0x1F2E, 2)                               # 0x2E1F
endian_store(0x1F2E3D4C, 4, Endian.BIG)           # b"\x1f\x2e\x3d\x4c"
endian_load(b"\x4c\x3d\x2e\x1f", Endian.LITTLE)   # 0x1F2E3D4C
```

Fixed-size byte arrays and sequences:

```python
from concrete_utils.misc import make_byte_array, sequence_init

make_byte_array(4, [2, 1], default=5)                  # b"\x02\x01\x05\x05"
sequence_init(lambda base, i: base + i, 5, 3)          # [3, 4, 5, 6, 7]
sequence_init(lambda base, i: base + i, 5, 3, count=4) # [3, 4, 5, 6, 0]
```

Running clean-up code when a block is left:

```python
from concrete_utils.scope_guard import ExceptionScopeGuard, ScopeExit, ScopeGuard

with ScopeExit(lambda: print("cleaned up")) as guard:
    ...
    guard.release()   # cancel the clean-up if the work succeeded

with ScopeGuard(lambda: print("always runs")):
    ...

with ExceptionScopeGuard(lambda: print("only on error")):
    ...
```

Operations dispatched on the type of their arguments:

```python
from concrete_utils.tag_invoke import CustomizationPoint, tag_invocable

describe = CustomizationPoint("describe")

class Point:
    pass

@describe.register(Point)
def _describe_point(point):
    return "a point"

describe(Point())                 # "a point"
tag_invocable(describe, 42)       # False
```

Status codes described by a table of data:

```python
import enum
from concrete_utils.status_domain import Errc, StatusDescriptor, StatusDomain

class MyErrc(enum.IntEnum):
    SUCCESS = 0
    PERM = 3

domain = StatusDomain(
    "my-domain",
    "{09E0ECBF-A737-454D-8633-17E733CDE15F}",
    [
        StatusDescriptor(MyErrc.SUCCESS, Errc.SUCCESS, "all good"),
        StatusDescriptor(MyErrc.PERM, Errc.PERMISSION_DENIED, "not allowed"),
    ],
)
code = domain.code(MyErrc.PERM)
code.failure()                      # True
code.message()                      # "not allowed"
code == Errc.PERMISSION_DENIED      # True
code.throw_exception()              # raises StatusError
```

Objects that keep their own reference count:

```python
from concrete_utils.intrusive_ptr import intrusive_ptr_import

class Counted:
    def __init__(self):
        self.count = 1
    def add_reference(self):
        self.count += 1
    def release(self):
        self.count -= 1
    def reference_count(self):
        return self.count

obj = Counted()
ptr = intrusive_ptr_import(obj)   # takes over the existing reference
extra = ptr.copy()                # obj.count == 2
extra.close()                     # obj.count == 1
with ptr:
    ...
# obj.count == 0
```

Classes whose methods have other names can take part by registering a
`ReferenceCountedTraits` subclass with `register_traits`.

UUID values with RFC variant and version inspection:

```python
from concrete_utils.uuid_value import Uuid
from concrete_utils.uuid_rng import RandomUuidV4Generator

value = Uuid.parse("47183823-2574-4bfd-b411-99ed177d3e43")
format(value, "#X")   # "{47183823-2574-4BFD-B411-99ED177D3E43}"
value.version()       # UuidVersion.RANDOM_NUMBER_BASED
value.canonical()     # the 16 bytes in network order

generate = RandomUuidV4Generator()
new_id = generate()
```

## What it does not do

This is a library only: it installs no command-line program. Random UUIDs
come from `random.Random` or a callable you supply, not from a
cryptographically secure source unless you pass one in.

## Running the tests

```
pip install concrete-utils[test]
pytest
```