"""
t9pad.trie
==========
Nine-way prefix tree keyed by key class.

Every node keeps the words whose key-class prefix equals the path leading to
it, in word-list order, so a lookup is a plain walk with no ranking step.
:func:`build_trie` freezes the tree before returning it: contents and child
slots become tuples, and lookups hand those out directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .keys import KeyClass, encode_word


class TrieNode:
    __slots__ = ("children", "content")

    def __init__(self) -> None:
        # slot i holds the child for KeyClass(i + 1)
        self.children: Sequence[TrieNode | None] = [None] * len(KeyClass)
        self.content: Sequence[str] = []

    def child(self, key: KeyClass) -> TrieNode | None:
        return self.children[key - 1]

    def _child_or_create(self, key: KeyClass) -> TrieNode:
        node = self.children[key - 1]
        if node is None:
            node = self.children[key - 1] = TrieNode()  # type: ignore[index]
        return node

    def insert(self, word: str, keys: Sequence[KeyClass]) -> None:
        """
        Append ``word`` to every node on the path spelled by ``keys``.

        Only valid before :meth:`freeze`.
        """
        if isinstance(self.content, tuple):
            raise TypeError("trie is frozen")
        node = self
        for key in keys:
            node = node._child_or_create(key)
            node.content.append(word)  # type: ignore[attr-defined]

    def freeze(self) -> None:
        """Turn every node's content and child slots into tuples."""
        stack = [self]
        while stack:
            node = stack.pop()
            node.content = tuple(node.content)
            node.children = tuple(node.children)
            stack.extend(c for c in node.children if c is not None)

    def find(self, keys: Iterable[KeyClass]) -> TrieNode | None:
        node: TrieNode | None = self
        for key in keys:
            node = node.child(key)
            if node is None:
                return None
        return node

    def lookup(self, keys: Iterable[KeyClass]) -> tuple[str, ...]:
        """
        Words whose key-class prefix equals ``keys``, in word-list order.

        A missing path is a miss, not an error: the result is empty.
        """
        node = self.find(keys)
        return tuple(node.content) if node is not None else ()

    def count_nodes(self) -> int:
        """Number of nodes below this one."""
        return sum(1 + c.count_nodes() for c in self.children if c is not None)


def build_trie(words: Iterable[str]) -> tuple[TrieNode, int]:
    """
    Index ``words`` and return ``(root, skipped)``, with ``root`` frozen.

    Words containing a character outside every candidate table are left out
    entirely; ``skipped`` counts them.
    """
    root = TrieNode()
    skipped = 0
    for word in words:
        keys = encode_word(word)
        if keys is None:
            skipped += 1
            continue
        root.insert(word, keys)
    root.freeze()
    return root, skipped
