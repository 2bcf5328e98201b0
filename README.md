# archlab

A small collection of computer-architecture exercises as a Python package:

- **Leaderboard** (`archlab.leaderboard`, `archlab.skiplist`): a sorted set
  with unique integer scores, backed by a skip list. `Leaderboard` answers
  Redis-style `zadd`, `zrem`, `zcard`, `zscore`, `zrank`, `zrevrank`, `zrange`,
  `zrevrange` and `zrangebyscore` queries. `format_int`, `format_nil` and
  `format_array` turn results into reply text.
- **Float conversion** (`archlab.floatconv`): converts 64-bit "ca25" floating
  point words (1 sign bit, 32-bit exponent biased by 0x7FFFFFFF, 31-bit
  fraction) to IEEE-754 single precision, rounding away from zero.
- **Packed node arithmetic** (`archlab.packed_node`): shows how an int8, a
  uint8 and an int16 field promote when computing `a * b + c` into an int32.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Leaderboard shell

```
archlab-leaderboard
```

Reads commands from standard input. Type `HELP` for the list and `EXIT` to
leave:

```
> ZADD alice 100
(integer) 1
> ZADD bob 200
(integer) 1
> ZREVRANGE 1 2
(array) 2 item(s)
  #1: bob (200)
  #2: alice (100)
```

The state lives in memory only; nothing is saved when the shell exits.

### Float conversion

```
archlab-convert < words.txt
```

Each whitespace-separated hexadecimal word on standard input is decoded as a
ca25 value; the tool prints the decoded fields, the converted single-precision
fields, and the resulting 32-bit pattern in hexadecimal. A token that is not
hexadecimal stops the run with exit status 1.

### Packed node arithmetic

```
archlab-packed-node
```

Prints the product, the addend and the sum for each of three identical nodes.

## Library use

```python
import random
from archlab.leaderboard import Leaderboard, format_array

board = Leaderboard(random.Random(0))
board.zadd("alice", 100)
board.zadd("bob", 200)
print(board.zrank("bob", False))        # 2
print(format_array(board.zrevrange(1, 2)), end="")
```

```python
from archlab.floatconv import describe

print(describe(0x3FFFFFFF80000000), end="")
```

## What is not included

The package has no cache simulator and no assembly-program runner; it covers
only the leaderboard, the float conversion and the packed node arithmetic
described above.