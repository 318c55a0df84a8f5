# lollykit

A small pure-Python library of containers, trees and text utilities. It has
no dependencies outside the standard library.

## Modules

- `lollykit.linked_list.LinkedList`: a singly linked list. It supports
  in-place `append`, `extend`, `push_front`, `pop_front` and `suppress_last`,
  and new-list operations `head`, `tail`, `reversed`, `remove`, `copy` and `+`.
  Comparisons use prefix order: `a < b` holds when `a` is a proper prefix of `b`.
- `lollykit.ntuple`: frozen `Pair`, `Triple`, `Quartet`, `Quintuple` and
  `Sextuple` records with fields `x1`, `x2`, ... and an order-sensitive 32-bit
  hash (`combine_hashes`).
- `lollykit.promise.Promise` and `lollykit.unary_function.UnaryFunction`:
  abstract callables. Subclasses implement `eval`.
- `lollykit.arrays`: `round_length`, `format_array`, `array_hash`, `subarray`,
  `scaled` and `divided`. Integer division truncates toward zero.
- `lollykit.sorting`: a stable merge sort driven by a less-or-equal
  predicate. It provides `merge_sort` (in place), `merge_sort_pair`,
  `sort_permutation` and `permute`.
- `lollykit.base64_codec`: `encode_base64` inserts a line break after every
  80 output characters. `decode_base64` is lenient: it skips foreign
  characters and stops at the first `=`.
- `lollykit.hashmap.HashMap`: a map that returns a default value for missing
  keys. It has `get_or_insert`, `reset`, `join`, `write_back`, `pre_patch`
  and `post_patch`. The module-level functions `changes` and `invert` compare
  a patch against a base map.
- `lollykit.hashfunc.MemoFunction`: a wrapper that remembers the results of
  a one-argument function.
- `lollykit.timer`: `BenchTimer` accumulates milliseconds per task and
  supports nested starts. It writes reports with `report` and `report_all`.
  The functions `timer_start`, `timer_cumul`, `timer_reset` and `bench_print`
  work on one shared timer.
- `lollykit.hashset.HashSet`: a set with subset ordering (`<=`, `<`).
- `lollykit.iteration`: `Cursor`, a forward cursor with the methods `busy`,
  `current`, `next`, `increase` and `remains`. It also provides `iterate` and
  `format_iterator`.
- `lollykit.rel_hashmap.RelativeHashMap`: a stack of hash maps. Use `extend`
  to push a layer, `shorten` to discard the top layer, and `merge` to fold it
  into the layer below.
- `lollykit.hashtree.HashTree`: a tree whose children are keyed by edge
  label. It suits dictionaries keyed by sequences. Use `ensure` to create a
  missing child. Indexing a missing child raises `KeyError`.
- `lollykit.tree.Tree`: labelled trees. There are atoms (`Tree.atom`) and
  compound nodes with an integer operator (`Tree.compound`). Conversions
  `as_int`, `as_double` and `as_bool` are available.
- `lollykit.ids.make_uuid`: returns a random version 4 UUID string.
- `lollykit.numeral`: `to_roman`, `to_upper_roman`, `to_hanzi`, `to_hex`,
  `to_upper_hex`, `to_padded_hex`, `to_padded_upper_hex`, `from_hex`,
  `as_hexadecimal`, `uint32_to_upper_hex` and `binary_to_hexadecimal`.
- `lollykit.unicode_utils`: `encode_as_utf8`, `decode_from_utf8`,
  `unicode_get_range`, `is_cjk_unified_ideographs`,
  `has_cjk_unified_ideographs`, `utf16_to_utf8` and `utf8_to_utf16`
  (big-endian UTF-16).

## Installation

```
pip install lollykit
```

## Examples

```python
from lollykit.numeral import to_roman, to_hanzi, to_hex
from lollykit.hashmap import HashMap
from lollykit.sorting import merge_sort

to_roman(1984)        # 'mcmlxxxiv'
to_hanzi(12)          # '十二'
to_hex(-255)          # '-ff'

m = HashMap(0)
m["a"] = 3
m["missing"]          # 0

items = [3, 1, 2]
merge_sort(items)     # sorts in place
items                 # [1, 2, 3]
```

## What it does not do

This is a library only. It has no command-line program. It does not make
HTTP requests, compute file digests, or run other programs.

## Running the tests

```
pip install -e ".[test]"
pytest
```