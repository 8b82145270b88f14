"""Problems whose answer is a single number computed from a few integers."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass


def ageing(x: int) -> int:
    """Age ten years ago."""
    return x - 10


def cclearn(n: int) -> int:
    """Total hours spent: two per problem."""
    return 2 * n


def chairs(x: int, y: int) -> int:
    """Chairs still needed for x people when y chairs exist."""
    return max(x - y, 0)


def cntwrd(n: int, m: int) -> int:
    """Words spoken in n minutes at m words per minute."""
    return n * m


def creds(x: int, y: int, z: int) -> int:
    """Credits from x four-credit and y two-credit courses; z courses earn none."""
    del z
    return x * 4 + y * 2


def dnation(x: int, y: int) -> int:
    """Difference between the target y and the current amount x."""
    return y - x


def kngtor(n: int, m: int) -> int:
    """Cost of n items at 5 and m items at 7."""
    return 5 * n + 7 * m


def prizepool(x: int, y: int) -> int:
    """Prize pool from x prizes of 10 and y prizes of 90."""
    return 10 * x + 90 * y


def rip2000(n: int) -> int:
    """Number of 500 notes needed to pay a fee of 2000 per person."""
    return (2000 * n) // 500


def sndmax(x: int, y: int, z: int) -> int:
    """The second largest of three numbers."""
    top = max(x, y, z)
    if x == top:
        return max(y, z)
    if y == top:
        return max(x, z)
    return max(x, y)


def waittime(k: int, x: int) -> int:
    """Remaining wait when k weeks have 7 days each and x days have passed."""
    return 7 * k - x


def bestoftwo(x: int, y: int) -> int:
    """The better of two scores."""
    return x if x >= y else y


def practiceperf(scores: Iterable[int]) -> int:
    """How many of the given weekly scores reach at least 10."""
    return sum(1 for score in scores if score >= 10)


def chefproduct(n: int) -> int:
    """Answer for the product-pairs problem, based on the integer square root of n."""
    if n == 2:
        return 0
    root = math.isqrt(n)
    if n % 2 == 0:
        return root // 2
    return (root + 1) // 2


def _pretty_from(a: int) -> int:
    last = a % 10
    if last == 9:
        return 1
    if last >= 3:
        return 2
    if last >= 0:
        return 3
    return 0


def _pretty_upto(a: int) -> int:
    last = a % 10
    if last == 9:
        return 3
    if 3 <= last < 9:
        return 2
    if 1 < last < 3:
        return 1
    return 0


def num239(l: int, r: int) -> int:
    """Count of numbers in [l, r] ending in 2, 3 or 9, by whole decades."""
    next_ten = l + (10 - l % 10)
    last_ten = r - r % 10
    if next_ten > r:
        next_ten = r
        last_ten = -1
        count = _pretty_upto(next_ten)
    else:
        count = _pretty_from(l)
    if next_ten < r:
        count += ((last_ten - next_ten) // 10) * 3
    if 0 < last_ten < r:
        count += _pretty_upto(r)
    return count


@dataclass(frozen=True)
class _Problem:
    solve: Callable[..., int]
    arity: int
    multi: bool = True
    end: str = "\n"


_PROBLEMS: dict[str, _Problem] = {
    "ageing": _Problem(ageing, 1),
    "cclearn": _Problem(cclearn, 1, multi=False, end=""),
    "chairs": _Problem(chairs, 2),
    "cntwrd": _Problem(cntwrd, 2),
    "creds": _Problem(creds, 3),
    "dnation": _Problem(dnation, 2),
    "kngtor": _Problem(kngtor, 2),
    "prizepool": _Problem(prizepool, 2),
    "rip2000": _Problem(rip2000, 1, multi=False, end=""),
    "sndmax": _Problem(sndmax, 3),
    "waittime": _Problem(waittime, 2),
    "bestoftwo": _Problem(bestoftwo, 2),
    "practiceperf": _Problem(lambda *s: practiceperf(s), 4, multi=False, end=""),
    "chefproduct": _Problem(chefproduct, 1),
    "num239": _Problem(num239, 2),
}


def _answers(problem: _Problem, tokens: Sequence[str]) -> list[str]:
    stream = iter(tokens)
    try:
        cases = int(next(stream)) if problem.multi else 1
        return [
            str(problem.solve(*(int(next(stream)) for _ in range(problem.arity))))
            for _ in range(cases)
        ]
    except StopIteration:
        raise ValueError("input ended early") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named problem on standard input and print the answers."""
    parser = argparse.ArgumentParser(prog="judgekit-numeric")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    problem = _PROBLEMS[args.problem]
    try:
        answers = _answers(problem, sys.stdin.read().split())
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write("".join(answer + problem.end for answer in answers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())