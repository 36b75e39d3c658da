# hyprutils

A small collection of utilities for desktop tooling. It runs on POSIX systems
(file descriptors and detached processes use `fcntl`, `select.poll` and `fork`).

## Modules

- `hyprutils.strings`: `trim`, `is_number` and `replace_in_string`.
- `hyprutils.varlist`: `VarList` (mutable) and `ConstVarList` (immutable) split a
  string into trimmed arguments. The delimiter `"s"` means any whitespace;
  `last_arg_no` stops splitting so the last argument holds the rest;
  `remove_empty` drops empty arguments; `VarList` can also honour backslash
  escapes with `handle_escape`. Indexing out of range gives `""`.
- `hyprutils.signals`: `Signal` with `register_listener` (the listener stays
  registered only while the returned `SignalListener` is kept alive) and
  `register_static_listener` (lives as long as the signal).
- `hyprutils.scopeguard`: `ScopeGuard`, a context manager that calls a function
  when its block is left.
- `hyprutils.edges`: `Edge` flags and the `Edges` set, with `top`, `left`,
  `bottom` and `right` properties and `|`, `&`, `^`.
- `hyprutils.vector2d`: `Vector2D` with component-wise arithmetic, `normalize`,
  `floor`, `round`, `clamp`, `distance`, `size`, `component_max`, and format
  flags `j` (JSON array), `X` (`WxH`) and a digit precision.
- `hyprutils.box`: `Box`, `BoxExtents` and the `Transform` enum
  (`NORMAL`, `ROTATED_90`, `ROTATED_180`, `ROTATED_270`, `FLIPPED`,
  `FLIPPED_90`, `FLIPPED_180`, `FLIPPED_270`).
- `hyprutils.mat3x3`: `Mat3x3`, a row-major single-precision 3x3 matrix with
  `identity`, `output_projection`, `project_box` and chaining in-place operations.
- `hyprutils.region`: `Region`, a set of integer pixels made of `Rect`s, with
  union, subtraction, intersection, inversion, transform, scaling and more.
- `hyprutils.bezier`: `BezierCurve`, a cubic curve from (0, 0) to (1, 1) with
  `x_for_t`, `y_for_t` and a sampled `y_for_point`.
- `hyprutils.animation_config`: `AnimationConfigTree` of
  `AnimationPropertyConfig` nodes that inherit values from their parents.
- `hyprutils.filedescriptor`: `FileDescriptor`, an owning wrapper around a raw
  descriptor (also a context manager), plus `fd_is_readable` and `fd_is_closed`.
- `hyprutils.process`: `Process`, which runs a program to completion
  (`run_sync`, collecting `stdout`, `stderr` and `exit_code`) or fully detached
  (`run_async`).
- `hyprutils.path`: finding `hypr/<program>.conf` through `$XDG_CONFIG_HOME`,
  `$HOME/.config`, `$XDG_CONFIG_DIRS` and `/etc/xdg` with `find_config`.

## Installation

```
pip install .
```

## Examples

Split a string:

```python
from hyprutils.varlist import VarList

args = VarList("hello    world!", 0, "s", True)
assert args[0] == "hello"
assert args[1] == "world!"
```

Work with boxes:

```python
from hyprutils.box import Box
from hyprutils.vector2d import Vector2D

box = Box(0, 0, 100, 100)
overlap = box.intersection(Box(50, 50, 100, 100))
assert overlap.pos() == Vector2D(50, 50)
```

Connect to a signal:

```python
from hyprutils.signals import Signal

signal = Signal()
listener = signal.register_listener(lambda data: print("got", data))
signal.emit(42)
```

Run a program:

```python
from hyprutils.process import Process

proc = Process("sh", ["-c", "echo \"Hello $WORLD!\""])
proc.add_env("WORLD", "World")
proc.run_sync()
assert proc.stdout == "Hello World!\n"
assert proc.exit_code == 0
```

Find a config file:

```python
from hyprutils.path import find_config

config_path, base_path = find_config("myprogram")
```

## What it does not do

The package has bezier curves and a tree of animation configurations, but no
animation manager and no animated variables: nothing here tracks values that
change over time or steps them along a curve. An application that wants
animations has to drive them itself, using `BezierCurve.y_for_point` and the
values from `AnimationConfigTree`.

There is no command-line program; everything is used as a library.

## Running the tests

```
pip install ".[test]"
pytest
```