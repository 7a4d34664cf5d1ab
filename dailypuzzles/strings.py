"""String puzzles: brackets, paths, senates, windows and variances."""

from collections import Counter, deque
from itertools import permutations

_CLOSING = {")": "(", "}": "{", "]": "["}
_VOWELS = frozenset("aeiou")


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in s is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if stack and _CLOSING.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def remove_stars(s: str) -> str:
    """Remove each star together with the closest non-star character to its left."""
    kept: list[str] = []
    for ch in s:
        if ch == "*":
            if not kept:
                raise ValueError("star with no character to remove")
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def simplify_path(path: str) -> str:
    """Return the canonical form of an absolute Unix-style path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave two words letter by letter, appending what is left over."""
    shared = min(len(word1), len(word2))
    merged = "".join(a + b for a, b in zip(word1, word2))
    return merged + word1[shared:] + word2[shared:]


def predict_party_victory(senate: str) -> str:
    """Return "Radiant" or "Dire", whichever party wins the senate vote."""
    n = len(senate)
    radiant = deque(i for i, ch in enumerate(senate) if ch == "R")
    dire = deque(i for i, ch in enumerate(senate) if ch != "R")
    while radiant and dire:
        r_turn = radiant.popleft()
        d_turn = dire.popleft()
        if r_turn < d_turn:
            radiant.append(r_turn + n)
        else:
            dire.append(d_turn + n)
    return "Radiant" if radiant else "Dire"


def max_vowels(s: str, k: int) -> int:
    """Return the largest number of vowels in any window of length k."""
    best = current = 0
    for i, ch in enumerate(s):
        if i >= k and s[i - k] in _VOWELS:
            current -= 1
        if ch in _VOWELS:
            current += 1
        best = max(best, current)
    return best


def buddy_strings(s: str, goal: str) -> bool:
    """Return True if swapping exactly two letters of s yields goal."""
    if len(s) != len(goal):
        return False
    if s == goal:
        return len(set(s)) < len(goal)
    diffs = [i for i, (a, b) in enumerate(zip(s, goal)) if a != b]
    if len(diffs) != 2:
        return False
    first, last = diffs
    return s[first] == goal[last] and s[last] == goal[first]


def max_consecutive_answers(answer_key: str, k: int) -> int:
    """Return the longest run of equal answers after changing at most k of them."""
    counts: Counter[str] = Counter()
    best_freq = 0
    start = 0
    for end, ch in enumerate(answer_key):
        counts[ch] += 1
        best_freq = max(best_freq, counts[ch])
        if end - start + 1 > best_freq + k:
            counts[answer_key[start]] -= 1
            start += 1
    return len(answer_key) - start


def largest_variance(s: str) -> int:
    """Return the largest count difference between two letters over any substring."""
    best = 0
    pairs = list(permutations(set(s), 2))
    for text in (s, s[::-1]):
        for major, minor in pairs:
            major_count = minor_count = 0
            for ch in text:
                if ch == major:
                    major_count += 1
                elif ch == minor:
                    minor_count += 1
                if major_count < minor_count:
                    major_count = minor_count = 0
                elif major_count > 0 and minor_count > 0:
                    best = max(best, major_count - minor_count)
    return best