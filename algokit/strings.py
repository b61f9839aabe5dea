"""String puzzles: anagrams, swaps, unique runs, repeats and palindromes."""

from __future__ import annotations


def is_anagram(s1: str, s2: str) -> bool:
    """Return True when the two strings hold the same characters."""
    return len(s1) == len(s2) and sorted(s1) == sorted(s2)


def are_almost_equal(s1: str, s2: str) -> bool:
    """Return True when at most one swap within ``s1`` makes it equal ``s2``."""
    if s1 == s2:
        return True
    if len(s1) != len(s2):
        return False
    differences = [i for i, (a, b) in enumerate(zip(s1, s2)) if a != b]
    if len(differences) != 2:
        return False
    first, second = differences
    return s1[first] == s2[second] and s1[second] == s2[first]


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def min_repeats(a: str, b: str) -> int:
    """Return how often ``a`` must be repeated to contain ``b``, or -1."""
    if not a and b:
        raise ValueError("cannot repeat an empty string to reach a non-empty one")
    count = 1
    repeated = a
    while len(repeated) < len(b):
        repeated += a
        count += 1
    if b in repeated:
        return count
    if b in repeated + a:
        return count + 1
    return -1


def is_palindrome(s: str) -> bool:
    """Return True when ``s`` reads the same in both directions."""
    return s == s[::-1]