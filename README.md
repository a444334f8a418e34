# oikit

Small, dependable helpers for algorithm practice and console tinkering:
string searching, number theory, bit tricks, counting and sorting, heaps,
simple containers, timing and logging, key decoding, a character canvas,
and a couple of file utilities. Pure Python, no dependencies.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `oikit.text`: `dec_len`, `is_digit`, `is_alpha`, `read_signed`
  (returns the value and the position after it), `prefix_function`,
  `find_occurrences`, `kmp_search` (overlapping matches; an empty pattern
  raises `ValueError`), `int_to_roman`, `roman_to_int`.
- `oikit.bits`: `bin_to_string`, `bits_belong`, `bit_length`, `count_ones`
  (32-bit two's complement view), `max_multi2_signed`,
  `format_bytes_binary`, and `BitCursor`, a bit position inside a
  `bytearray` with `flip`, `advance`, `+=` and the `bit` property.
- `oikit.numbers`: `linear_sieve`, `sieve_6k`, `is_prime`,
  `lagrange_interpolate`, `binary_gcd`, `isqrt32`, `fast_pow`.
- `oikit.counting`: the `Tally` multiset (`add`, `remove`, `count`,
  `total`, `most`, `most_repeat`, `keys`, `merge`, `clear`, `format`) and
  the functions `most_common`, `find_positions`, `count_unordered`,
  `fill_random`, `lsd_radix_sort`, `auto_lsd_sort`.
- `oikit.heaps`: `BinaryHeap` ordered by a comparison of your choice
  (default: largest on top), plus `MinHeap` and `MaxHeap`. Methods: `push`,
  `pop`, `top`, `merge`; `len()` and iteration in array order. Popping or
  peeking an empty heap raises `IndexError`.
- `oikit.containers`: `LinkedStack` (`push`, `pop`, `top`), `DynamicArray`
  (`append`, `erase`, `resize`, `capacity`, indexing with bounds checks) and
  `Block` (`resize`, `fill`, `copy`, `multiply`, `extend_by`, `release`,
  `allocated`).
- `oikit.timing`: `Stopwatch` (`toggle` starts and stops it,
  `elapsed_ms`), `LogWriter` (writes `[YYYY-MM-DD HH:MM:SS:mmm] LEVEL:
  message` lines to a file, a stream or stdout; usable as a context
  manager), `now_datetime`, `format_log_line`, `debug_run`.
- `oikit.keys`: the `Key` codes, `decode_key` and `SlotEditor`, a line
  editor with ten slots by default (`type_char`, `backspace`, `left`,
  `right`, `handle`, `render`).
- `oikit.canvas`: the `Canvas` character grid (`fill`, `reset`, `put`,
  `next_line`, `render`, `render_marked`, `render_marked_split`,
  `load_glyph`, `load_glyph_file`, `draw_line`, `put_text`),
  `read_font_config` and `split_font`.
- `oikit.fileops`: `xor_invert_file` (applying it twice restores the file)
  and `CharReader`, which reads a file byte by byte and reports line breaks
  as `CR` and `LF` and the end as `EOF`; `seek` takes a `Whence`.

## Examples

```python
from oikit.text import kmp_search, int_to_roman, roman_to_int
from oikit.numbers import linear_sieve, is_prime
from oikit.heaps import MaxHeap

kmp_search("abababa", "aba")      # [0, 2, 4]
int_to_roman(1994)                # "MCMXCIV"
roman_to_int("MCMXCIV")           # 1994
linear_sieve(20)                  # [2, 3, 5, 7, 11, 13, 17, 19]
is_prime(97)                      # True

heap = MaxHeap()
for value in (3, 9, 1):
    heap.push(value)
heap.top()                        # 9
```

Decoding keys from any source of raw codes:

```python
from oikit.keys import Key, SlotEditor, decode_key

codes = iter([224, 75])
decode_key(lambda: next(codes))   # Key.LEFT

editor = SlotEditor()
editor.handle(ord("h"))
editor.handle(ord("i"))
editor.render(40)                 # "0>|hi"
```

## Command line

`oikit-canvas` fills a canvas (100 by 10, with `.` by default) and prints
it with a column ruler and row digits:

```
oikit-canvas
oikit-canvas --width 40 --height 6 --fill "#"
oikit-canvas --font path/to/font HELLO
```

With `--font`, the directory must hold a `config` file whose first two
integers are the glyph width and height, and one glyph file per character
named after that character.

## What it does not do

`oikit.keys` does not read the keyboard itself: `decode_key` takes a
function that returns raw console codes, and `SlotEditor` only changes its
state and renders a status line, leaving the input loop and screen output
to the caller.