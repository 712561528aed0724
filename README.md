# minish

Building blocks for a small command shell: an ordered environment table,
expansion of `~` and `$VARIABLE` in a command line, splitting into words,
lookup of commands on `PATH` and running them, plus a set of small text,
byte-buffer and list helpers.

## Installation

```
pip install .
```

## What it does not do

The package has no interactive shell: there is no prompt, no read–eval
loop, no `minish` command and no builtins such as `cd`, `echo`, `env`,
`setenv`, `unsetenv` or `exit`. It provides the parts such a loop would be
built from.

## Usage

### Environment

`minish.environment.Environment` keeps variables in the order they were
first defined.

```python
from minish.environment import Environment

env = Environment.from_environ({"HOME": "/home/demo", "USER": "demo"})
env.set("EDITOR", "vi")
env.set("USER", "other", overwrite=False)   # kept as "demo"
env.increase_shlvl()                         # SHLVL becomes "1"
env.unset("EDITOR")                          # True
env.to_environ()  # ['HOME=/home/demo', 'USER=demo', 'SHLVL=1']
```

`from_environ` also takes `"KEY=VALUE"` strings; entries without a value
are skipped.

### Parsing a line

```python
from minish.parser import parse_input

parse_input("echo ~ $USER", env)  # ['echo', '/home/demo', 'demo']
```

- Tabs count as spaces.
- The first `~` is replaced by `HOME` (`expand_tilde`).
- `$NAME` is replaced by the value of the longest defined variable whose
  name starts the text after the `$` (`expand_dollars`).
- Words are split on spaces, with empty words dropped.

There is no quoting, piping or redirection.

### Running commands

```python
from minish.executor import find_executable, run_external

env.set("PATH", "/usr/bin:/bin")
find_executable("ls", env)         # e.g. '/usr/bin/ls'
status = run_external(["true"], env)
```

A name that exists as given is used directly; otherwise each `PATH`
directory is tried in order. An unknown command writes
`SHELL: command not found: <name>` to the given stream (standard error by
default) and returns 127.

### Reading lines

```python
import io
from minish.linereader import LineReader

list(LineReader(io.StringIO("a\nb")))  # ['a', 'b']
```

### Helpers

- `minish.chars`: ASCII classification (`is_alpha`, `is_digit`, …),
  `to_lower`/`to_upper`, `atoi` (C-style, wraps at 32 bits) and `itoa`.
- `minish.search`: `find_char`, `rfind_char`, `length_until`,
  `char_position`, `compare`, `compare_n`, `equal`, `equal_n`, `find`,
  `find_n`.
- `minish.transform`: `split_words`, `replace_first`, `map_chars`,
  `map_chars_indexed`, `skip_char`.
- `minish.textops`: `join`, `join3`, `concat_n`, `bounded_concat`,
  `copy_n`, `duplicate`, `duplicate_n`, `substring`, `trim`, `length`.
- `minish.memory`: byte-buffer functions `mem_alloc`, `mem_set`, `bzero`,
  `mem_copy`, `mem_ccopy`, `mem_chr`, `mem_cmp`, `mem_move`.
- `minish.linkedlist`: `LinkedList` and `Node` with `push_front`, `append`,
  `pop_front`, `clear`, `for_each`, `map` and `swap_after`.
- `minish.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `print_n_chars`, writing to a given stream or standard output.

## Running the tests

```
pip install .[test]
pytest
```