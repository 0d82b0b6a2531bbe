# boggleht

A small collection of hashing and word-search tools:

- `boggleht.strhash.MyStringHash`: a hash for strings made of letters and
  digits, at most 30 characters long (longer keys raise `ValueError`). It cuts
  the string from its end into chunks of six characters, reads each chunk as a
  base-36 number (`a`-`z` are 0-25, `0`-`9` are 26-35, anything else is 0) and
  combines the chunks with five weights, modulo 2**64. With `debug=True` (the
  default) the weights are fixed; with `debug=False` they are drawn from a
  clock-seeded generator. Letters are case-insensitive.
  `letter_digit_to_number` gives the value of a single character.
- `boggleht.hashtable.HashTable`: an open-addressing hash table. It grows
  through a fixed list of prime capacities when (live entries + tombstones)
  reach the load factor before an insertion, and marks removed entries with
  tombstones until the next resize. The probing strategy is pluggable:
  `LinearProber` or `DoubleHashProber`, both subclasses of `Prober`.
- `boggleht.boggle`: builds seeded random boards using Scrabble letter
  frequencies and finds dictionary words that run in a straight line to the
  right, downward, or diagonally down-right. From each starting square and in
  each direction only the longest word is kept.
- `boggleht.rng.MersenneTwister`: a 32-bit Mersenne Twister generator. Seeded
  boards depend on it, so a given seed always gives the same board.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line tools

Hash a string using the fixed debug weights:

```
str-hash abc
```

This prints `h(abc)=9953503400`. Without an argument it prints a short
message and exits with status 1.

Generate and solve a Boggle board:

```
boggle-driver 5 42 words.txt
```

The arguments are the board size, the random seed and a dictionary file with
whitespace-separated words. The tool prints the board, then
`Found N words:` and the words found, comma-separated in sorted order. With
fewer than three arguments it prints a usage line and exits with status 1; if
the dictionary file cannot be opened it reports that on standard error and
exits with status 1.

Run a short demonstration of the hash table:

```
ht-demo
```

It inserts ten keys into a double-hashed table, updates, looks up and removes
some of them, and prints what happens along the way.

## Library use

```python
from boggleht.strhash import MyStringHash
from boggleht.hashtable import HashTable, DoubleHashProber

h = MyStringHash(True)
h("abc")                      # 9953503400

table = HashTable(0.7, DoubleHashProber(MyStringHash()))
table.insert("hi1", 1)
table["hi1"] += 1             # item assignment only updates existing keys
table.find("hi1")             # ("hi1", 2)
"hi1" in table                # True
table.remove("hi1")
len(table)                    # 0
table.empty()                 # True
table.at("missing")           # raises KeyError
```

`HashTable` also counts probe steps (`total_probes()`, `clear_total_probes()`)
and can write its occupied buckets to a text stream with `report_all(out)`.
`insert` raises `RuntimeError` if no free location is found or the table has
run out of capacities.

```python
from boggleht.boggle import gen_board, format_board, parse_dict, boggle

board = gen_board(4, 7)
print(format_board(board))
dictionary, prefixes = parse_dict("words.txt")   # ValueError if unreadable
found = boggle(dictionary, prefixes, board)
```

## What it does not do

The word finder only follows straight lines in three directions; it does not
search paths that turn, go left or up, or reuse the board the way a full
Boggle game does. There is no interactive game, scoring or timer.