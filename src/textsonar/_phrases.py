"""Multi-word phrase scan (Aho-Corasick) with leftmost-longest selection."""

from __future__ import annotations

from typing import Iterable

import ahocorasick


class PhraseMatcher:
    """Finds whole-word occurrences of a fixed phrase set in lowercased text."""

    __slots__ = ("_automaton", "_size")

    def __init__(self, phrases: Iterable[str]) -> None:
        self._automaton = ahocorasick.Automaton()
        self._size = 0
        for phrase in phrases:
            normalized = " ".join(phrase.lower().split())
            if normalized and self._automaton.add_word(normalized, normalized):
                self._size += 1
        if self._size:
            self._automaton.make_automaton()

    def __len__(self) -> int:
        return self._size

    def find(self, text_lower: str) -> list[tuple[int, int, str]]:
        """Return (start, end, phrase) matches, non-overlapping, in text order."""
        if not self._size:
            return []

        raw_matches: list[tuple[int, int, str]] = []
        for end_inclusive, phrase in self._automaton.iter(text_lower):
            end = end_inclusive + 1
            start = end - len(phrase)
            if start > 0 and text_lower[start - 1].isalnum():
                continue
            if end < len(text_lower) and text_lower[end].isalnum():
                continue
            raw_matches.append((start, end, phrase))

        # Sort by start position, then by length descending (longest first)
        raw_matches.sort(key=lambda m: (m[0], -(m[1] - m[0])))

        selected: list[tuple[int, int, str]] = []
        last_end = -1
        for start, end, phrase in raw_matches:
            if start >= last_end:
                selected.append((start, end, phrase))
                last_end = end
        return selected
