# rustdrill

Worked answers to a set of small Rust exercises, written as plain Python
functions and classes so they can be read, run and tested side by side with
the exercises. The package also has a few helpers for coloured terminal
output and a progress spinner.

## Installing

```
pip install rustdrill
```

There are no runtime dependencies beyond the standard library.

## The drills

`rustdrill.drills` holds one module per topic:

| Module | Covers |
| --- | --- |
| `quizzes` | `calculate_apple_price`, `times_two`, `my_macro`, `string`, `string_slice` |
| `basics` | variables, reassignment, shadowing, constants, `macro_message` |
| `functions` | `call_me`, `sale_price`, `is_even`, `square` |
| `branching` | `bigger`, `fizz_if_foo` |
| `primitives` | `greetings`, `classify_char`, `array_size_message`, `nice_slice`, `describe_cat`, `second_of` |
| `strings` | `current_favorite_color`, `is_a_color_word` |
| `collections` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `array_and_vec`, `vec_loop` |
| `structs` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitStruct`, `Order`, `create_order_template`, `Package` |
| `messages` | `Point`, `Move`, `Echo`, `ChangeColor`, `Quit`, `State.process` |
| `snacks` | `make_sausage`, `favorite_snacks`, `epoch_message` |
| `ownership` | `fill_vec`, `describe_vec`, `add_twice` |
| `options` | `print_number`, `option_numbers`, `describe_word`, `drain_integers`, `describe_point` |
| `generics` | `shopping_list`, `Wrapper`, `ReportCard` |
| `traits` | `append_bar` for strings and lists |
| `lints` | `nearly_equal`, `add_optional` |
| `errors` | `generate_nametag_text`, `total_cost`, `remaining_tokens`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `climate` | `parse_climate` and its `ParseClimateError` subclasses |
| `from_str` | `parse_person` and its `ParsePersonError` subclasses |
| `from_into` | `Person.from_text`, falling back to `Person.default()` |
| `try_from_into` | `color_from_tuple`, `color_from_array`, `color_from_slice` |
| `iterators` | `capitalize_first`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` counting |
| `shared` | `offset_sums` over worker threads, and the `Cons`/`Nil` list |
| `jobs` | `run_jobs`, a worker thread completing jobs while the caller polls |

Failures are raised as exceptions rather than returned:

```python
from rustdrill.drills.quizzes import calculate_apple_price
from rustdrill.drills.iterators import divide, factorial, NotDivisible
from rustdrill.drills.climate import parse_climate, NoCity

calculate_apple_price(65)           # 65
factorial(4)                        # 24
divide(81, 9)                       # 9
parse_climate("Munich,2015,23.1")   # Climate(city='Munich', year=2015, temp=23.1)

try:
    divide(81, 6)
except NotDivisible as err:
    print(err.dividend, err.divisor)  # 81 6

try:
    parse_climate(",1997,20.5")
except NoCity as err:
    print(err)                        # no city name
```

## Terminal helpers

`rustdrill.ui` provides:

- `warn(message)` and `success(message)` print a red or green status line,
  with a marker emoji, or a plain `!` / `✓` when the `NO_EMOJI` environment
  variable is set (`no_emoji()` reports this). Colours are only used when
  standard output is a terminal.
- `Spinner(message)` draws a ticking spinner on standard error while work is
  in progress; `set_message` changes its text and `finish_and_clear` stops it
  and erases the line. It also works as a context manager, and draws nothing
  when the stream is not a terminal.

```python
from rustdrill.ui import Spinner, success

with Spinner("Working...") as spinner:
    spinner.set_message("Almost done...")
success("Finished")
```

## What this package does not do

There is no command-line program. The package does not read an exercise
list, compile or run exercise files, track which exercises are finished,
give hints, or watch files for changes; it only contains the worked answers
and the output helpers above.

## Running the tests

```
pip install "rustdrill[test]"
pytest
```