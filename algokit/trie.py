"""A prefix tree and word segmentation built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A set of words that answers exact and prefix lookups."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Return whether any inserted word begins with ``prefix``."""
        return self._find(prefix) is not None

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _word_ends(self, text: str, start: int) -> Iterator[int]:
        """Yield each end index at which ``text[start:end]`` is an inserted word."""
        node = self._root
        for end in range(start, len(text)):
            node = node.children.get(text[end])
            if node is None:
                return
            if node.is_word:
                yield end + 1


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Return whether ``s`` splits into a sequence of words from ``word_dict``."""
    trie = Trie()
    for word in word_dict:
        trie.insert(word)

    reachable = [False] * (len(s) + 1)
    reachable[0] = True
    for start in range(len(s)):
        if reachable[start]:
            for end in trie._word_ends(s, start):
                reachable[end] = True
    return reachable[-1]