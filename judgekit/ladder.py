"""Shortest transformation sequence between words."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from string import ascii_lowercase


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Number of words in a ladder from begin_word to end_word, or 0 if none.

    Each step replaces one character with a lowercase letter and must land
    on an unused word of word_list.
    """
    unused = set(word_list)
    queue: deque[tuple[str, int]] = deque([(begin_word, 1)])
    longest = 0
    while queue:
        word, depth = queue.popleft()
        if word == end_word:
            longest = max(longest, depth)
        for i in range(len(word)):
            for letter in ascii_lowercase:
                candidate = word[:i] + letter + word[i + 1:]
                if candidate in unused:
                    unused.remove(candidate)
                    queue.append((candidate, depth + 1))
    return longest