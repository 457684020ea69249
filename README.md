# metagems

Small helpers built around reflection and formatting. Each module does one
job:

| Module | What it does |
| --- | --- |
| `metagems.enums` | Look up enum members by name and names by member, build flag enums |
| `metagems.shell` | Run a shell command and capture its output, print a version banner |
| `metagems.fibonacci` | Compute and print Fibonacci numbers |
| `metagems.duff` | Copy items in unrolled chunks of a chosen width |
| `metagems.series` | Read power-series coefficients from a file and evaluate them |
| `metagems.serialize` | Render nested values (dataclasses, tuples, lists, dicts, enums, `None`) as text |
| `metagems.cirformat` | `%`-style formatting of any value, and `{name}` format strings |
| `metagems.rpn` | Parse and evaluate reverse-Polish formulas |
| `metagems.tuples` | Build tuple classes with `_0`, `_1`, … members |
| `metagems.variant` | A tagged union over a fixed list of types |
| `metagems.erasure` | Type erasure over an interface of named methods |
| `metagems.dispatch` | Choose a computation from a shape, a colour and a fill |
| `metagems.jsonparams` | Find and load typed parameter records from parsed JSON data |
| `metagems.reflect` | Print the members of records and derive new record types |

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install metagems
```

To run the test suite:

```
pip install "metagems[test]"
pytest
```

## Library examples

### Enums

```python
import enum
from metagems.enums import define_flag_enum, enum_from_name, enum_from_name_error, name_from_enum

class Shape(enum.Enum):
    circle = 0
    square = 1

enum_from_name(Shape, "square")        # Shape.square
enum_from_name(Shape, "rhombus")       # None
name_from_enum(Shape, Shape.circle)    # "circle"
enum_from_name_error(Shape, "rhombus") # raises UnknownEnumeratorError

Flags = define_flag_enum("Flags", ["a", "b", "c"])
Flags.a | Flags.c                      # flags with values 1 and 4
```

### Shell commands

```python
from metagems.shell import capture_call, version_banner

capture_call("echo hi")        # "hi\n" (stdout and stderr together)
version_banner("0123456789abcdef")
```

`capture_call` raises `CommandError`, which holds the command's output and
exit status, when the command exits with a non-zero status.

### Fibonacci numbers and unrolled copies

```python
from metagems.fibonacci import fib, format_numbers
from metagems.duff import duff_copy

fib(5)                                       # [0, 1, 1, 2, 3]
duff_copy([0] * 5, [1, 2, 3, 4, 5], 5, 2)    # [1, 2, 3, 4, 5]
```

`fib` requires a count of at least 2.

### Power series

```python
from metagems.series import evaluate_series, read_file

evaluate_series([1.0, 2.0, 3.0], 2.0)   # 1 + 2*2 + 3*4 = 17.0
coefficients = read_file("series.txt")  # whitespace-separated numbers
```

### Rendering values

```python
from metagems.serialize import stream, stream_flat, stream_simple

stream_simple([1, 2, 3])     # "[ 1, 2, 3 ]"
stream_simple({"a": 1})      # "{ a : 1 }"
stream_flat([1, 2])          # "list [ int \"1\", int \"2\" ]"
print(stream({"x": [1, 2]})) # one element per indented line, with type names
```

Mappings are written with their keys sorted, `None` is written `null`, and
plain tuples name their members `_0`, `_1`, and so on. `describe_members`
lists the type, name and value of each member of a record.

### Formatting

```python
from metagems.cirformat import cirformat, eprintf

cirformat("values are %.\n", [1, 2, 3])  # "values are [ 1, 2, 3 ].\n"
cirformat("100%% of %", "it")            # "100% of it"
eprintf("x = {x}\n", {"x": 5})           # prints "x = 5"
```

Each `%` takes the next argument; a mismatch between placeholders and
arguments raises `FormatError`. `fcirprint` writes to a given stream and
`cirprint` to standard output; both return the length of the text written.

### Reverse-Polish formulas

`^` means `pow`. Unknown tokens are variables or numbers.

```python
from metagems.rpn import eval_rpn, parse, evaluate

tree = parse("z 1 x / sin y * ^")
evaluate(tree, {"x": 0.3, "y": 0.6, "z": 0.9})
eval_rpn("1 2 +")     # 3.0
```

A malformed formula or an unknown variable raises `RPNError`.

### Tuples

```python
from metagems.tuples import cir_tuple, get, make_tuple_type, unique_tuple_type

t = cir_tuple(1, "a", 2.5)
t._1            # "a"
get(t, 2)       # 2.5
Pair = make_tuple_type(int, str)
Pair()          # members default-constructed: _0=0, _1=""
unique_tuple_type(int, float, int, str)   # members int, float, str
```

### Variant

```python
from metagems.variant import Variant

v = Variant((int, float), 100)
v.get(int)        # 100
v.set(3.14)
v.tag()           # 1
v.get_index(1)    # 3.14
moved = v.take()  # v is now empty
bool(v)           # False
```

Storing a value whose type is not one of the member types raises
`TypeError`; asking for an inactive member raises `LookupError`.

### Type erasure

```python
from metagems.erasure import (
    AllCapsPrinter, Erased, PRINTER_INTERFACE, ReversePrinter,
)

obj = Erased.construct(PRINTER_INTERFACE, AllCapsPrinter)
obj.print("Hello")     # prints HELLO
obj.has("save")        # False
copy = obj.copy()      # wraps an independent copy

rev = Erased.construct(PRINTER_INTERFACE, ReversePrinter)
rev.save("bar.save", "w")   # raises MethodNotImplementedError
```

`PRINTER_INTERFACE` has the methods `print` (required) and `save`
(optional). An `Interface` requires all of its methods unless told
otherwise; wrapping an object that lacks a required method raises
`TypeError`.

### JSON parameters

```python
from metagems.jsonparams import KernelKey, Params, find_json_value

data = [{"sm": 52, "type": "float", "bytes_per_lane": 16,
         "lanes_per_thread": 4, "flags": ["ldg", "ftz"]}]
find_json_value(data, Params, KernelKey(52, "float"))
```

Missing items, missing fields and unknown enumerator names are reported on
standard output, and the affected members keep their defaults.

### Reflection

```python
from dataclasses import dataclass
from metagems.reflect import describe_type, member_sum, print_object, struct_of_vectors

@dataclass
class Foo:
    x: int
    y: float

print_object(Foo(5, 3.14))   # int x: 5 / float y: 3.14
describe_type(Foo)           # "Foo\n  int x\n  float y\n"
member_sum(Foo(2, 3.0))      # 5.0
struct_of_vectors(Foo)()     # a record with x=[] and y=[]
```

## Command-line tools

Check whether a name is a shape (`circle`, `square`, `rhombus`, `nonagon`,
`water`):

```
metagems-enums square
```

Print the first N Fibonacci numbers (N at least 2):

```
metagems-fibonacci 10
```

Evaluate the power series whose coefficients are in `series.txt` in the
current directory:

```
metagems-series 0.5
```

Evaluate a reverse-Polish formula with `name=value` variables, or the
built-in formula at x=.3, y=.6, z=.9 when given no arguments:

```
metagems-rpn
metagems-rpn "x y +" x=1 y=2
```

Combine a shape, a colour and a fill and apply the result to a number:

```
metagems-dispatch circle red solid 2.5
```

Print a version banner with the first ten digits of the current git commit
hash (run inside a git checkout):

```
metagems-version
```

## What the package does not do

- `eprintf` does not evaluate the expressions written in braces; it looks
  each one up, as written, in the mapping it is given.
- `metagems.jsonparams` does not open or parse files; it works on data that
  has already been loaded, for example with `json.load`.
- Functions and records are built at run time from Python values; nothing
  generates or compiles source code.