"""Problems over a list of integers read after a count."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate, chain, groupby, pairwise

_GRID = 49


def a1(target: int, values: Iterable[int]) -> bool:
    """Whether some non-empty selection of the values sums to target.

    Values are taken from the largest down; a value larger than what is
    still needed is skipped.
    """
    ordered = sorted(values)
    if not ordered:
        raise ValueError("at least one value is required")
    pending = {target}
    for value in reversed(ordered[1:]):
        following: set[int] = set()
        for needed in pending:
            if value > needed:
                following.add(needed)
            elif value == needed:
                return True
            else:
                following.add(needed - value)
                following.add(needed)
        pending = following
    return ordered[0] in pending


def _same_sign(a: int, b: int) -> bool:
    return a * b >= 0


def altaray(values: Sequence[int]) -> list[int]:
    """Length of the longest alternating-sign run starting at each position."""
    runs: list[int] = []
    following: int | None = None
    for value in reversed(values):
        if following is not None and not _same_sign(value, following):
            runs.append(runs[-1] + 1)
        else:
            runs.append(1)
        following = value
    runs.reverse()
    return runs


def compressvd(values: Iterable[int]) -> int:
    """Number of values left after merging equal neighbours."""
    return sum(1 for _ in groupby(values))


def doll(k: int, heights: Iterable[int]) -> int:
    """How many heights exceed k."""
    return sum(1 for height in heights if height > k)


def missp(values: Iterable[int]) -> list[int]:
    """Values that occur an odd number of times, in ascending order."""
    counts = Counter(values)
    return sorted(value for value, count in counts.items() if count % 2 == 1)


def moochef(l: int, r: int, values: Iterable[int]) -> tuple[int, int]:
    """Highest and lowest running score, +1 for values in [l, r] and -1 otherwise."""
    scores = list(accumulate((1 if l <= v <= r else -1 for v in values), initial=0))
    return max(scores), min(scores)


def proc18a(k: int, values: Sequence[int]) -> int:
    """Largest sum of a prefix shorter than k or of a window of exactly k values."""
    if k < 0:
        raise ValueError("window size must not be negative")
    if not values:
        raise ValueError("at least one value is required")
    prefix = list(accumulate(values, initial=0))
    return max(
        prefix[end] if end <= k else prefix[end] - prefix[end - k]
        for end in range(1, len(values) + 1)
    )


def ratingprac(values: Iterable[int]) -> bool:
    """Whether the values never decrease, starting from zero."""
    return all(later >= earlier for earlier, later in pairwise(chain([0], values)))


def todolist(values: Iterable[int]) -> int:
    """How many values are at least 1000."""
    return sum(1 for value in values if value >= 1000)


def warriorchef(h: int, values: Iterable[int]) -> int:
    """The value that brings h to zero or below when the largest go first, else 0."""
    remaining = h
    for value in sorted(values, reverse=True):
        remaining -= value
        if remaining <= 0:
            return value
    if remaining > 0:
        return 0
    raise ValueError("at least one value is required when h is not positive")


def watscore(submissions: Iterable[tuple[int, int]]) -> int:
    """Total of the best score on each of problems 1 to 8."""
    best: dict[int, int] = {}
    for problem, score in submissions:
        best[problem] = max(best.get(problem, 0), score)
    return sum(best.get(problem, 0) for problem in range(1, 9))


def wav2(roots: Iterable[int], queries: Iterable[int]) -> list[str]:
    """Sign of a polynomial with the given roots at each query point."""
    ordered = sorted(roots)
    answers = []
    for query in queries:
        below = bisect_left(ordered, query)
        if not ordered or (below < len(ordered) and ordered[below] == query):
            answers.append("0")
        elif below % 2 == 0:
            answers.append("POSITIVE")
        else:
            answers.append("NEGATIVE")
    return answers


def maxcomp(events: Iterable[tuple[int, int, int]]) -> int:
    """Largest total compensation from events that do not overlap in time."""
    best = [[0] * _GRID for _ in range(_GRID)]
    total = [[0] * _GRID for _ in range(_GRID)]
    for start, end, compensation in events:
        if not (0 <= start < _GRID and 0 <= end < _GRID):
            raise ValueError(f"event times must lie in 0..{_GRID - 1}")
        best[start][end] = max(compensation, best[start][end])
    for i in range(_GRID):
        for j in range(i, _GRID):
            if i == 0 and j == 0:
                continue
            if i == 0:
                total[i][j] = max(best[i][j], total[i][j - 1])
            else:
                total[i][j] = max(
                    best[i][j] + total[i - 1][i],
                    total[i - 1][j],
                    total[i][j - 1],
                )
    return total[_GRID - 1][_GRID - 1]


class _Tokens:
    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def number(self) -> int:
        try:
            return int(next(self._words))
        except StopIteration:
            raise ValueError("input ended early") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _yes_no(flag: bool) -> str:
    if flag:
        return "Yes"
    return "No"


def _case_a1(tokens: _Tokens) -> str:
    n, m = tokens.number(), tokens.number()
    return _yes_no(a1(m, tokens.numbers(n))) + "\n"


def _case_altaray(tokens: _Tokens) -> str:
    runs = altaray(tokens.numbers(tokens.number()))
    return "".join(f"{run} " for run in runs) + "\n"


def _case_compressvd(tokens: _Tokens) -> str:
    return f"{compressvd(tokens.numbers(tokens.number()))}\n"


def _case_doll(tokens: _Tokens) -> str:
    n, k = tokens.number(), tokens.number()
    return f"{doll(k, tokens.numbers(n))}\n"


def _case_missp(tokens: _Tokens) -> str:
    return "".join(f"{v}\n" for v in missp(tokens.numbers(tokens.number())))


def _case_moochef(tokens: _Tokens) -> str:
    n, l, r = tokens.numbers(3)
    high, low = moochef(l, r, tokens.numbers(n))
    return f"{high} {low}\n"


def _case_proc18a(tokens: _Tokens) -> str:
    n, k = tokens.number(), tokens.number()
    return f"{proc18a(k, tokens.numbers(n))}\n"


def _case_ratingprac(tokens: _Tokens) -> str:
    return _yes_no(ratingprac(tokens.numbers(tokens.number()))) + "\n"


def _case_todolist(tokens: _Tokens) -> str:
    return f"{todolist(tokens.numbers(tokens.number()))}\n"


def _case_warriorchef(tokens: _Tokens) -> str:
    n, h = tokens.number(), tokens.number()
    return f"{warriorchef(h, tokens.numbers(n))}\n"


def _case_watscore(tokens: _Tokens) -> str:
    n = tokens.number()
    submissions = [(tokens.number(), tokens.number()) for _ in range(n)]
    return f"{watscore(submissions)}\n"


def _case_wav2(tokens: _Tokens) -> str:
    n, q = tokens.number(), tokens.number()
    roots = tokens.numbers(n)
    return "".join(answer + "\n" for answer in wav2(roots, tokens.numbers(q)))


def _case_maxcomp(tokens: _Tokens) -> str:
    n = tokens.number()
    events = [tuple(tokens.numbers(3)) for _ in range(n)]
    return f"{maxcomp(events)}\n"


@dataclass(frozen=True)
class _Problem:
    case: Callable[[_Tokens], str]
    multi: bool = True


_PROBLEMS: dict[str, _Problem] = {
    "a1": _Problem(_case_a1),
    "altaray": _Problem(_case_altaray),
    "compressvd": _Problem(_case_compressvd),
    "doll": _Problem(_case_doll),
    "missp": _Problem(_case_missp),
    "moochef": _Problem(_case_moochef),
    "proc18a": _Problem(_case_proc18a),
    "ratingprac": _Problem(_case_ratingprac),
    "todolist": _Problem(_case_todolist),
    "warriorchef": _Problem(_case_warriorchef),
    "watscore": _Problem(_case_watscore),
    "wav2": _Problem(_case_wav2, multi=False),
    "maxcomp": _Problem(_case_maxcomp),
}


def _solve(problem: _Problem, text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.number() if problem.multi else 1
    return "".join(problem.case(tokens) for _ in range(cases))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named problem on standard input and print the answers."""
    parser = argparse.ArgumentParser(prog="judgekit-arrays")
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