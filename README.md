# npputils

A collection of small, dependency-free helpers for everyday scripting.

| Module | What it offers |
| --- | --- |
| `npputils.colour` | `RGB`, `RGBA`, `HSL`, `HSV`; hex parsing with `RGB.parse` / `RGBA.parse`; `str()` gives `#rrggbb` / `#rrggbbaa`; conversions `rgb_to_rgba`, `rgba_to_rgb`, `rgb_to_hsl`, `rgb_to_hsv`, `hsl_to_rgb`, `hsv_to_rgb`, `hsl_to_hsv`, `hsv_to_hsl` |
| `npputils.b64` | `base64_encode`, `base64url_encode` (padding optional), `base64_decode`, `base64url_decode` (padding optional) |
| `npputils.csvfield` | `csv_field` quotes one CSV field, doubling inner quotes |
| `npputils.hexdump` | `byte_to_string`, `hexdump` (rows of 16 bytes in groups of 4, to stdout or a printer callable), `load_hex` (lower-case hex, optional `0x` prefix) |
| `npputils.fraction` | `Fraction`, always reduced, with `inv`, `quotient`, `floor`, `ceil`, `compute` and `+ - * /` |
| `npputils.complexnum` | `Complex` with `polar`, `modulus`, `argument`, `conjugate`, `vec` and arithmetic; dividing by zero raises `ZeroDivisionError` |
| `npputils.vec2` | `Vec2` with addition, subtraction, scaling, dot product (`v1 * v2`) and division (truncating for integers) |
| `npputils.interval` | `Interval(lower, upper)`, where `None` is an infinite bound; `is_finite`, `length`, `contains`, `in` |
| `npputils.conv` | `parse_int(text, bits=64, signed=True)` and `parse_bool` (`"true"` / `"false"`) |
| `npputils.text` | `split` (a lazy iterator that keeps empty pieces) and `join` |
| `npputils.diff` | Myers line diff: `edit_path` returns a list of `EditOp` (`KEEP`, `ADD`, `DEL`) or `None` when nothing changed; `diff` writes a coloured diff |
| `npputils.arguments` | `ProgramArgs`: an executable plus a queue of arguments (`from_argv`, `peek`, `pop`, `drop`, `push`, `argc`, `argv`) |
| `npputils.fileio` | `write_to_file`, `read_file_text`, `read_file_binary` |
| `npputils.jsonconv` | `convert_json(data, target)` for `int`, `float`, `str`, `bool`, `pathlib.Path` and `TimeUnit` durations; `register_converter` adds targets |
| `npputils.jsonreader` | `JsonReader` with `read`, `read_opt` (value or callable default), `recurse`, `recurse_opt` |
| `npputils.jsonselect` | `json_select(data, path)` yields the values reached by keys, indices and `Wildcard()` / `WILDCARD` |
| `npputils.environ` | `ProgramEnv`: an editable copy of the environment (`from_environ`, `from_envp`, `get`, `set`, `unset`, `envp`) |
| `npputils.searchpath` | `read_path` and `program_path` for finding programs on `PATH` |
| `npputils.process` | `Subprocess.spawn`, `join`, `poll_stopped`, `retcode`, `termsig`, `signal` |
| `npputils.procinfo` | `proc_exe`, `proc_cwd`, `proc_root`, read from `/proc` |
| `npputils.prehashed` | `PreHashed`: a value whose hash is computed once, usable to look up plain keys in dicts and sets |
| `npputils.syserror` | `error_from_errno(code)` raises the matching `OSError` unless the code is 0 |

## Installation

```sh
pip install npputils
```

Python 3.10 or newer is required. The package has no third-party
dependencies.

## Examples

```python
from npputils.colour import RGB, HSL, hsl_to_rgb
from npputils.b64 import base64_encode, base64_decode
from npputils.fraction import Fraction
from npputils.interval import Interval
from npputils.text import split, join
from npputils.diff import edit_path, EditOp
from npputils.jsonreader import JsonReader
from npputils.jsonselect import json_select, WILDCARD

assert RGB.parse("ABCDEF") == RGB(0xAB, 0xCD, 0xEF)
assert str(RGB(1, 35, 69)) == "#012345"
assert hsl_to_rgb(HSL(0, 1.0, 0.5)) == RGB(255, 0, 0)

assert base64_encode(b"\xfb\xfd", True) == "+/0="
assert base64_decode("MBE") == b"\x30\x11"

assert Fraction(5, 6) * Fraction(3, 7) == Fraction(15, 42)
assert Fraction(-6, 5).floor() == -2

span = Interval(32, 64)
assert span.length() == 33 and 40 in span
assert str(Interval(None, 64)) == "[-inf, 64]"

assert list(split("straw,berry,cake", ",")) == ["straw", "berry", "cake"]
assert join([1, 2, 3], "+") == "1+2+3"

assert edit_path("1\n2", "1\n2\n3") == [EditOp.KEEP, EditOp.KEEP, EditOp.ADD]
assert edit_path("same", "same") is None

reader = JsonReader({"value": 80})
assert reader.read("value", int) == 80
assert reader.read_opt("missing", int, 50) == 50

doc = [{"value": 1}, {"v": 4}, {"value": 2}]
assert list(json_select(doc, [WILDCARD, "value"])) == [1, 2]
```

## Command-line tools

Three small commands come with the package. Each accepts `-h` / `--help`.

Show a coloured line diff of two files; the exit status is 1 when they
differ and 0 when they are the same:

```sh
npp-diff original.txt modified.txt
```

Run a program found on `PATH` (or given by path), wait for it and report how
it ended; the exit status is the program's own, or 1 if it was killed by a
signal:

```sh
npp-spawn ls -l
```

Print the executable, root and working directory of a process, by PID or
`current` for the process that started the command:

```sh
npp-procinfo current
```

## Limits

- `proc_exe`, `proc_cwd`, `proc_root` and `npp-procinfo` read `/proc`, so
  they work on Linux only.
- `Subprocess` does not capture or redirect the child's standard streams;
  the child shares those of the calling process.
- `diff` always writes ANSI colour codes, whether or not the output is a
  terminal.

## Running the tests

```sh
pip install "npputils[test]"
pytest
```