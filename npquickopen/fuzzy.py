"""Fuzzy matching of a short pattern against file names, with scores."""

from __future__ import annotations

from typing import NamedTuple

CHARACTER_MATCH_BONUS = 1
SAME_CASE_BONUS = 3
FIRST_LETTER_BONUS = 13
CONSECUTIVE_MATCH_BONUS = 5
START_OF_EXTENSION_BONUS = 3
CAMEL_CASE_BONUS = 10
SEPARATOR_BONUS = 10


class FuzzyMatch(NamedTuple):
    """Score of a match and the target positions of the matched characters."""

    score: int
    positions: list[int]


class FuzzyMatcher:
    """Scores how well a target string matches a fuzzy pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    def score(self, target: str) -> int:
        """Return the match score of ``target``; 0 means no match."""
        return self._compute(target)[0]

    def match(self, target: str) -> FuzzyMatch:
        """Return the score and the matched positions in ``target``."""
        score, matches = self._compute(target)
        return FuzzyMatch(score, _restore_positions(matches))

    def _compute(self, target: str) -> tuple[int, list[list[int]]]:
        pattern = self.pattern
        if not pattern or not target or len(pattern) > len(target):
            return 0, []

        width = len(target)
        scores = [[0] * width for _ in pattern]
        matches = [[0] * width for _ in pattern]

        for pi, pattern_char in enumerate(pattern):
            for ti in range(width):
                left = scores[pi][ti - 1] if ti else 0
                has_diag = pi > 0 and ti > 0
                diag = scores[pi - 1][ti - 1] if has_diag else 0
                sequence = matches[pi - 1][ti - 1] if has_diag else 0

                if not diag and pi:
                    gain = 0
                else:
                    gain = _character_score(pattern_char, target, ti, sequence)

                if gain and left <= diag + gain:
                    matches[pi][ti] = sequence + 1
                    scores[pi][ti] = diag + gain
                else:
                    matches[pi][ti] = 0
                    scores[pi][ti] = left

        return scores[-1][-1], matches


def _restore_positions(matches: list[list[int]]) -> list[int]:
    if not matches:
        return []
    positions: list[int] = []
    pi = len(matches) - 1
    ti = len(matches[0]) - 1
    while True:
        if matches[pi][ti] == 0:
            if ti > 0:
                ti -= 1
            else:
                break
        else:
            positions.append(ti)
            if pi > 0 and ti > 0:
                pi -= 1
                ti -= 1
            else:
                break
    positions.reverse()
    return positions


def _character_score(pattern_char: str, target: str, index: int, sequence: int) -> int:
    current = target[index]
    if pattern_char.lower() != current.lower():
        return 0

    score = CHARACTER_MATCH_BONUS
    if sequence > 0:
        score += sequence * CONSECUTIVE_MATCH_BONUS
    if pattern_char == current:
        score += SAME_CASE_BONUS

    if index == 0:
        score += FIRST_LETTER_BONUS
    else:
        previous = target[index - 1]
        if previous in (" ", "_"):
            score += SEPARATOR_BONUS
        elif previous == ".":
            score += START_OF_EXTENSION_BONUS
        elif previous.islower() and current.isupper():
            score += CAMEL_CASE_BONUS
    return score