"""Graph puzzles answered by counting the edges at each node."""

from collections import Counter


def find_center(edges):
    """Return the centre of a star graph given by its edges."""
    if len(edges) < 2:
        raise ValueError("a star needs at least two edges")
    (a, b), second = edges[0], edges[1]
    if a in second:
        return a
    if b in second:
        return b
    raise ValueError("the edges do not form a star")


def find_judge(n, trust):
    """Return the town judge among people 1..n, or -1 if there is none.

    The judge trusts nobody and is trusted by everybody else.
    """
    trusting = Counter(truster for truster, _ in trust)
    trusted = Counter(trustee for _, trustee in trust)
    for person in range(1, n + 1):
        if not trusting[person] and trusted[person] == n - 1:
            return person
    return -1