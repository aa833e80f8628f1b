# cpsolve

Solutions to classic competitive programming problems, written as ordinary
Python functions. Each one takes Python values (integers, lists, strings,
tuples) and returns its answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `cpsolve.cp_class`: `max_scheduled_classes` (greedy room scheduling),
  `fortune_teller` (parity game, returns `"Alice"` or `"Bob"`),
  `rock_paper_scissors_wins`, `is_tree_distance_matrix`, `max_credits`
  (at most one course per lecturer under a credit limit) and the
  `DequeRotation` class, whose `query(step)` returns the pair taken from the
  front of the deque at a given step.
- `cpsolve.cf1031`: `max_actions`, `can_cover`, `min_lost_gold`.
- `cpsolve.cf1037`: `is_consistent_gcd`.
- `cpsolve.cf1038`: `grid_possible`, `min_pile_operations`.
- `cpsolve.cf1042`: `surplus_steps`, `alternating_sequence`,
  `equal_modulo_multisets`, `min_leaf_removals`.
- `cpsolve.cf1046`: `balanced_score`, `unique_peak_permutation`,
  `max_block_length`, and `locate_point`, which takes a callable
  `ask(direction, distance)` standing in for the interactive judge.
- `cpsolve.cf1048`: `steps_to_equal`.
- `cpsolve.cf1052`: `max_equal_count`, `can_remove_two`, `build_permutation`,
  `max_xor_pairing`.
- `cpsolve.global_round29`: `min_moves`, `build_sequence`, `is_reducible`.
- `cpsolve.icpc_wf2025`: `find_start` and `sunshine_distance`.
- `cpsolve.dp`: `book_shop`, `coin_combinations_ordered`,
  `coin_combinations_unordered`, `dice_combinations`, `grid_paths`,
  `min_coins`, `plus_or_times`, `removing_digits`. Counting functions return
  their result modulo 1e9+7.
- `cpsolve.graph`: `cyclic_at_height`, `count_rooms`, `message_route`.
- `cpsolve.math`: `can_fold`, `min_days`, `plus_minus_possible`,
  `divisor_sum`.
- `cpsolve.searching`: `gifts_needed`.
- `cpsolve.text`: `borders`, `palindrome_reorder`.

## Example

```python
from cpsolve.dp import dice_combinations, min_coins
from cpsolve.graph import count_rooms
from cpsolve.text import palindrome_reorder

dice_combinations(3)                 # 4
min_coins([1, 5, 7], 11)             # 3
count_rooms(["#.#", "###", "#.#"])   # 2
palindrome_reorder("AAAACACBA")      # "AAACBCAAA"
```

## Results and errors

How a function reports that a case has no answer depends on the problem:
some return `None` (`message_route`, `palindrome_reorder`,
`unique_peak_permutation`, `build_permutation`), some return `-1`
(`min_coins`, `min_moves`), and yes/no problems return a `bool`. Malformed
input, such as ragged grids, mismatched list lengths or non-positive sizes,
raises `ValueError`.

## What it does not do

There is no command-line program: nothing reads problem input from standard
input or prints answers in a judge's format. `find_start` only locates the
`S` cell of a grid; it does not solve the rest of that rover problem.