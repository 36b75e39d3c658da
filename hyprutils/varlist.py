"""Splitting strings into argument lists."""

from __future__ import annotations

from typing import Callable, Iterator

from hyprutils.strings import WHITESPACE, trim


def _is_delim(char: str, delim: str) -> bool:
    # The delimiter "s" stands for any whitespace character.
    if delim == "s":
        return char in WHITESPACE
    return char == delim


def _item(args: list[str], index: int) -> str:
    if 0 <= index < len(args):
        return args[index]
    return ""


def _join(args: list[str], joiner: str, start: int, end: int) -> str:
    last = end or len(args)
    return joiner.join(args[start:last])


class VarList:
    """A mutable list of trimmed arguments split from a string."""

    def __init__(
        self,
        text: str,
        last_arg_no: int = 0,
        delim: str = ",",
        remove_empty: bool = False,
        handle_escape: bool = False,
    ) -> None:
        self._args: list[str] = []

        if not remove_empty and not text:
            self._args.append("")
            return

        spans: list[tuple[int, int]] = []
        current_start = 0
        count = 0
        length = len(text)
        position = 0

        while position < length:
            char = text[position]
            if handle_escape and char == "\\" and position + 1 < length:
                position += 2
                continue

            if _is_delim(char, delim):
                if not remove_empty or position > current_start:
                    spans.append((current_start, position))
                    count += 1

                current_start = position + 1

                if count == last_arg_no - 1:
                    spans.append((position + 1, length))
                    break

            position += 1

        if current_start < length:
            spans.append((current_start, length))

        for start, end in spans:
            segment = text[start:end]
            if handle_escape:
                segment = segment.replace("\\", "")
            self._args.append(trim(segment))

    def __len__(self) -> int:
        return len(self._args)

    def __getitem__(self, index: int) -> str:
        """Return the argument at ``index``, or an empty string when out of range."""
        return _item(self._args, index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._args)

    def __contains__(self, item: object) -> bool:
        return item in self._args

    def __repr__(self) -> str:
        return f"VarList({self._args!r})"

    def join(self, joiner: str, start: int = 0, end: int = 0) -> str:
        """Join the arguments from ``start`` up to ``end`` (0 means all)."""
        return _join(self._args, joiner, start, end)

    def map(self, func: Callable[[str], str]) -> None:
        """Replace every argument with ``func(argument)``."""
        self._args = [func(arg) for arg in self._args]

    def append(self, arg: str) -> None:
        """Add an argument at the end."""
        self._args.append(arg)


class ConstVarList:
    """An immutable list of trimmed arguments split from a string."""

    def __init__(
        self,
        text: str,
        last_arg_no: int = 0,
        delim: str = ",",
        remove_empty: bool = False,
    ) -> None:
        self._args: list[str] = []
        if not text:
            return

        separated = "".join("\0" if _is_delim(char, delim) else char for char in text)

        position = 0
        count = 0
        for segment in separated.split("\0"):
            if remove_empty and not segment:
                continue
            count += 1
            if count == last_arg_no:
                self._args.append(trim(text[position:]))
                break
            position += len(segment) + 1
            self._args.append(trim(segment))

    def __len__(self) -> int:
        return len(self._args)

    def __getitem__(self, index: int) -> str:
        """Return the argument at ``index``, or an empty string when out of range."""
        return _item(self._args, index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._args)

    def __contains__(self, item: object) -> bool:
        return item in self._args

    def __repr__(self) -> str:
        return f"ConstVarList({self._args!r})"

    def join(self, joiner: str, start: int = 0, end: int = 0) -> str:
        """Join the arguments from ``start`` up to ``end`` (0 means all)."""
        return _join(self._args, joiner, start, end)

    def map(self, func: Callable[[str], object]) -> None:
        """Call ``func`` with every argument in order."""
        for arg in self._args:
            func(arg)