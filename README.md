# tclib

A small collection of everyday building blocks with no third-party
dependencies. Requires Python 3.10 or later.

## Modules

- `tclib.strings`: string helpers that tolerate `None` for a missing string:
  `strconcat`, `streql`, `strneql`, `strcaseeql`, `strncaseeql`, `strcmp`,
  `strcasecmp`, `strstr`, `strchr`, `strrchr`, `chomp`, `chompd`,
  `strlist_includes`, plus integer conversions `atoi`, `itoa`, `utoa`
  (unsigned 32-bit), `itox` (hex digit of the low four bits) and `ctoi`.
- `tclib.rand`: `JsfRandom`, a small four-word generator of signed 32-bit
  values (`seed`, `rand`); the module-level `srand` and `rand` drive a shared
  instance, and `system_seed` reads an unsigned 32-bit seed from
  `/dev/urandom` or `/dev/random`, falling back to the shared generator.
- `tclib.mtrand`: `MersenneTwister`, an MT19937 generator of unsigned 32-bit
  values. `next()` returns one value and the object is also an endless
  iterator. A seed of 0 draws a seed from `system_seed`.
- `tclib.sysutil`: byte-level helpers over binary streams and file
  descriptors: `getc`, `putc`, `write`, `seek`, `open_reader`, `open_writer`,
  `ttyname`, `isatty`, `is_directory`, `is_file` and `execvp`. Failures are
  raised as `OSError`.
- `tclib.stdio`: `getln`, `puts`, `putln`, `putdec`, `puterr`, `puterrln`,
  byte and line copying (`copy_byte`, `copy_bytes`, `copy_line`,
  `copy_lines`, each returning `False` when end of file came first), and the
  tilde run-length pair `compress` / `decompress`.
- `tclib.stack`: `Stack`, a LIFO stack with `push`, `pop` (raises
  `IndexError` when empty) and `is_empty`; it also supports `len()`, truth
  testing and iteration from the top down.
- `tclib.pattern`: `match(subject, pattern)`, a tiny matcher supporting
  literals, `.`, `?`, `*`, `+`, the anchors `^` and `$`, backslash escapes,
  bracketed sets with ranges and POSIX class names such as `[:digit:]`.
  An unterminated bracketed set raises `ValueError`.
- `tclib.nanoid`: `nanoid(seed=None)`, a 21-character identifier drawn from
  `A-Z a-z 0-9 _ -`.
- `tclib.wav`: `WavWriter`, which writes mono 16-bit 44.1 kHz PCM files and
  fills in the chunk sizes on `close()`; it can be used as a context manager.

## Examples

```python
from tclib.strings import strstr, chomp
from tclib.mtrand import MersenneTwister
from tclib.pattern import match
from tclib.stack import Stack

strstr("haystack", "st")          # -> "stack"
chomp("line\n")                   # -> "line"
match("hello", "^he")             # -> True
match("hello", "lo$")             # -> True

mt = MersenneTwister(5489)
mt.next()                         # -> 3499211612

s = Stack()
s.push(1)
s.push(2)
s.pop()                           # -> 2
```

Run-length compression between binary streams:

```python
import io
from tclib.stdio import compress, decompress

packed = io.BytesIO()
compress(io.BytesIO(b"aaaaaab"), packed)
packed.getvalue()                 # -> b"~Fab"
packed.seek(0)
out = io.BytesIO()
decompress(packed, out)
out.getvalue()                    # -> b"aaaaaab"
```

Writing a WAVE file:

```python
from tclib.wav import WavWriter

with WavWriter("tone.wav") as wav:
    wav.write([0, 1000, -1000, 0])
```

## What it does not do

This is a library only: it installs no command-line programs. The WAVE
support writes files but does not read them, and the pattern matcher is a
deliberately small one, not a full regular-expression engine.

## Tests

```
pip install -e .[test]
pytest
```