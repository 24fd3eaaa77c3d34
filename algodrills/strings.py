"""Puzzles over strings: subsequences, words, prefixes, windows and anagrams."""


def is_subsequence(s, t):
    """Tell whether the characters of ``s`` appear in ``t`` in the same order."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def length_of_last_word(s):
    """Return the length of the last space-separated word in ``s``."""
    trimmed = s.rstrip(" ")
    if not trimmed:
        raise ValueError("the string holds no word")
    return len(trimmed.rsplit(" ", 1)[-1])


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("at least one string is required")
    if any(word == "" for word in strs):
        return ""
    first, last = min(strs), max(strs)
    prefix = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def length_of_longest_substring(s):
    """Return the length of the longest substring of ``s`` with no repeated character."""
    last_index = {}
    start = 0
    longest = 0
    for position, char in enumerate(s):
        previous = last_index.get(char)
        if previous is not None and previous >= start:
            longest = max(longest, position - start)
            start = previous + 1
        last_index[char] = position
    return max(longest, len(s) - start)


def group_anagrams(strs):
    """Group the strings of ``strs`` that are anagrams of one another."""
    groups = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def minimum_recolors(blocks, k):
    """Return the fewest 'W' blocks to repaint so that ``k`` consecutive blocks are 'B'."""
    if not 1 <= k <= len(blocks):
        raise ValueError(f"k must lie between 1 and {len(blocks)}")
    white = blocks[:k].count("W")
    fewest = white
    for entering, leaving in zip(blocks[k:], blocks):
        white += (entering == "W") - (leaving == "W")
        fewest = min(fewest, white)
        if fewest == 0:
            break
    return fewest