"""Problems over words and strings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import groupby

_VOWELS = frozenset("aeiouAEIOU")


def _longest_run(s: str, vowels: bool) -> int:
    return max(
        (sum(1 for _ in group) for is_vowel, group in groupby(s, _VOWELS.__contains__)
         if is_vowel == vowels),
        default=0,
    )


def digarr(digits: str) -> bool:
    """Whether the digits contain a 0 or a 5."""
    return "0" in digits or "5" in digits


def ezspeak(s: str) -> bool:
    """Whether no four consonants stand in a row."""
    return _longest_run(s, vowels=False) < 4


def happystr(s: str) -> bool:
    """Whether more than two vowels stand in a row."""
    return _longest_run(s, vowels=True) > 2


def playstr(s: str, r: str) -> bool:
    """Whether both strings have the same number of '0's and of other characters."""
    def counts(text: str) -> tuple[int, int]:
        zeros = text.count("0")
        return zeros, len(text) - zeros

    return counts(s) == counts(r)


def recentcont(names: Iterable[str]) -> tuple[int, int]:
    """Number of START38 entries and of all others."""
    starters = others = 0
    for name in names:
        if name == "START38":
            starters += 1
        else:
            others += 1
    return starters, others


def wordle(s: str, t: str) -> str:
    """G where the guess t matches s, B elsewhere, over the length of s."""
    if len(t) < len(s):
        raise ValueError("guess is shorter than the answer")
    return "".join("G" if a == b else "B" for a, b in zip(s, t))


def zooz(n: int) -> str:
    """A string of n characters with 1 at both ends and 0 between."""
    return "".join("1" if i in (0, n - 1) else "0" for i in range(n))


class _Tokens:
    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        return int(self.word())


def _case_digarr(tokens: _Tokens) -> str:
    tokens.number()
    return ("Yes" if digarr(tokens.word()) else "No") + "\n"


def _case_ezspeak(tokens: _Tokens) -> str:
    tokens.number()
    return ("Yes" if ezspeak(tokens.word()) else "No") + "\n"


def _case_happystr(tokens: _Tokens) -> str:
    word = tokens.word()
    if happystr(word):
        return "Happy\n"
    return "Sad\n"


def _case_playstr(tokens: _Tokens) -> str:
    tokens.number()
    s, r = tokens.word(), tokens.word()
    return ("YES" if playstr(s, r) else "NO") + "\n"


def _case_recentcont(tokens: _Tokens) -> str:
    n = tokens.number()
    starters, others = recentcont(tokens.word() for _ in range(n))
    return f"{starters} {others}\n"


def _case_wordle(tokens: _Tokens) -> str:
    s, t = tokens.word(), tokens.word()
    return wordle(s, t) + "\n"


def _case_zooz(tokens: _Tokens) -> str:
    return zooz(tokens.number()) + "\n"


@dataclass(frozen=True)
class _Problem:
    case: Callable[[_Tokens], str]


_PROBLEMS: dict[str, _Problem] = {
    "digarr": _Problem(_case_digarr),
    "ezspeak": _Problem(_case_ezspeak),
    "happystr": _Problem(_case_happystr),
    "playstr": _Problem(_case_playstr),
    "recentcont": _Problem(_case_recentcont),
    "wordle": _Problem(_case_wordle),
    "zooz": _Problem(_case_zooz),
}


def _solve(problem: _Problem, text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.number()
    return "".join(problem.case(tokens) for _ in range(cases))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named problem on standard input and print the answers."""
    parser = argparse.ArgumentParser(prog="judgekit-textual")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = _solve(_PROBLEMS[args.problem], sys.stdin.read())
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())