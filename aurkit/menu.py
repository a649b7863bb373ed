"""Parsing of numbered selection menus such as ``1 2-4 ^3 extra``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_SEPARATORS = re.compile(r"[\s,]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str) -> int | None:
    """Return ``text`` as a non-negative integer, or None if it is not one."""
    if _UNSIGNED.fullmatch(text):
        return int(text)
    return None


@dataclass
class NumberMenu:
    """A user's selection of numbered entries and named words.

    Entries may be single numbers, inclusive ranges ``a-b`` or words.
    A leading ``^`` turns an entry into an exclusion.
    """

    in_range: list[range] = field(default_factory=list)
    ex_range: list[range] = field(default_factory=list)
    in_word: list[str] = field(default_factory=list)
    ex_word: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> NumberMenu:
        """Build a menu selection from user input."""
        menu = cls()
        for word in filter(None, _SEPARATORS.split(text)):
            invert = word.startswith("^")
            word = word.lstrip("^")
            ranges = menu.ex_range if invert else menu.in_range
            words = menu.ex_word if invert else menu.in_word

            start_str, sep, rest = word.partition("-")
            start = _parse_unsigned(start_str)
            if start is None:
                words.append(start_str)
                continue
            if not sep:
                ranges.append(range(start, start + 1))
                continue

            end = _parse_unsigned(rest.split("-", 1)[0])
            if end is None:
                words.append(start_str)
            else:
                ranges.append(range(start, end + 1))
        return menu

    def contains(self, n: int, word: str) -> bool:
        """Whether entry number ``n`` labelled ``word`` is selected."""
        if any(n in r for r in self.in_range) or word in self.in_word:
            return True
        if any(n in r for r in self.ex_range) or word in self.ex_word:
            return False
        return not self.in_range and not self.in_word