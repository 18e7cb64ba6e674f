# idiomkit

A collection of small, self-contained programming idioms, each in its own
module and each usable on its own. The package has no runtime dependencies.

| Module | What it gives you |
| --- | --- |
| `idiomkit.typelist` | `TypeList`, an immutable, hashable list of types, with `is_list`, `is_empty`, `size`, `front`, `back`, `pop_front`, `push_front`, `push_back`, `replace_front`, `nth_element`, `reverse` |
| `idiomkit.typelist_predicates` | `negation`, `any_of`, `none_of`, `all_of`, their `_if` and `_from` variants, `is_unique`, `is_same`, `has_nested_list`, `push_front_unique`, `push_back_unique`, `push_front_if`, `push_back_if` |
| `idiomkit.typelist_algorithms` | `transform`, `accumulate`, `unique`, `unique_reverse`, `push_back_termwise`, `linear_list`, `concatenate`, `copy`, `find_if`, `for_each` |
| `idiomkit.comparable` | `Comparable`, a mixin that derives `!=`, `>`, `<=`, `>=` from `==` and `<`, and the sample class `Foo` |
| `idiomkit.string_switch` | `fnv1a_32`, `string_hash` and `switch` for dispatching on strings through their 32-bit FNV-1a hash |
| `idiomkit.static_string` | `StaticString` and `literal`: immutable strings with bounds-checked indexing that concatenate with `+` |
| `idiomkit.registrar` | `Registrar`, a name-to-factory table with an `enrol` class decorator, `DuplicateRegistrationError`, and the `Shape` / `Editor` interfaces |
| `idiomkit.catalogue` | the registrars `shapes` and `editors`, filled with `Circle`, `Rectangle`, `Triangle`, `Acrobat` and `WordPad` |
| `idiomkit.ascii` | `AsciiString`, `sieve`, `cast`, `is_ascii`, `replace_with`, `raise_on_violation`, `read_ascii`, `write_ascii` |
| `idiomkit.pdag` | `asynchronize`, `future_unwrap`, `async_adapter` for building task graphs that run on threads and return futures; `Stopwatch` |
| `idiomkit.errors` | `ErrorCode`, `ErrorCategory`, `ErrorCondition`, `make_error_code`, `process`, and the enums `HttpErrc`, `GenericErrc`, `FutureErrc`, `IoErrc` |
| `idiomkit.weak_worker` | `Worker` and `Destination`: background updates that are skipped once the worker is gone |
| `idiomkit.urlreader` | `BlockingStream` and `UrlStream` for copying the data at a URL into a stream in fixed-size portions |

## Installation

```
pip install idiomkit
```

To run the tests:

```
pip install "idiomkit[test]"
pytest
```

## Examples

### Type lists

```python
from idiomkit.typelist import TypeList, front, push_back, reverse
from idiomkit.typelist_algorithms import linear_list, unique

ints = TypeList(int, bool)
assert front(ints) is int
assert push_back(ints, float) == TypeList(int, bool, float)
assert reverse(ints) == TypeList(bool, int)
assert unique(TypeList(int, int, str)) == TypeList(int, str)
assert linear_list(TypeList(TypeList(int, TypeList(str)))) == TypeList(int, str)
```

### Comparisons from two operators

```python
from idiomkit.comparable import Foo

assert Foo(1) != Foo(2)
assert Foo(1) <= Foo(2)
```

### Switching on strings

```python
from idiomkit.string_switch import switch

result = switch("value Y", {"value X": lambda: "x", "value Y": lambda: "y"}, lambda: "?")
assert result == "y"
```

### Self-registering factories

```python
from idiomkit.registrar import Registrar, Shape

shapes = Registrar()

@shapes.enrol("square")
class Square(Shape):
    def _do_draw(self):
        print("square")

shapes.get("square").draw()       # square
assert shapes.get("unknown") is None
```

Registering a name twice raises `DuplicateRegistrationError`.

### Fixed strings

```python
from idiomkit.static_string import literal

phrase = literal("Hello") + ", " + "World" + "!"
print(str(phrase))   # Hello, World!
assert len(phrase) == 13
```

### ASCII-only text

```python
from idiomkit.ascii import sieve, replace_with, raise_on_violation

print(sieve("café", replace_with("?")))   # caf?
sieve("café", raise_on_violation)         # raises ValueError
```

### Error codes

```python
from idiomkit.errors import GenericErrc, HttpErrc, make_error_code

ec = make_error_code(HttpErrc.forbidden)
assert ec.message() == "Forbidden"
assert ec == GenericErrc.permission_denied
```

## Commands

Each command runs a short demonstration of one module:

```
idiomkit-compare
idiomkit-switch
idiomkit-static-string
idiomkit-catalogue
idiomkit-pdag
idiomkit-errors
idiomkit-workers
idiomkit-fetch
```

`idiomkit-pdag` runs the same computation serially and as a parallel task
graph and prints the whole seconds each took; `--scale` sets the seconds per
time unit of the simulated work (default 1.0).

`idiomkit-fetch` downloads pages over the network: it prints the page given
by `--show` and saves the page given by `--save` to the file named by
`--output`. When a page cannot be retrieved, it prints the error instead.

## What the package does not do

The string types here work on Python `str` (and, for `idiomkit.ascii`,
`bytes` input); there are no separate narrow and wide string variants.
The type-list functions operate on values at run time; nothing is checked
before the program runs.