"""Key ordering used to group lines before merging."""

from functools import cmp_to_key

KEY_TERMINATORS = frozenset(" \t=")


def compare_keys(line1: str, line2: str) -> int:
    """Compare two raw lines by the case-insensitive content of their keys.

    Characters after the key (the separator and the value) are ignored, so
    lines with equal keys compare equal. A line whose key ends first sorts
    before a longer key sharing the same prefix.

    Args:
        line1: First raw line.
        line2: Second raw line.

    Returns:
        Negative, zero or positive, like a classic ``cmp`` function.
    """
    for c1, c2 in zip(line1, line2):
        terminated1 = c1 in KEY_TERMINATORS
        terminated2 = c2 in KEY_TERMINATORS
        if terminated1 and terminated2:
            return 0
        if terminated1:
            return -1
        if terminated2:
            return 1
        if c1 != c2:
            c1, c2 = c1.upper(), c2.upper()
            if c1 != c2:
                c1, c2 = c1.lower(), c2.lower()
                if c1 != c2:
                    return -1 if c1 < c2 else 1
    return len(line1) - len(line2)


def sort_lines(lines: list[str]) -> list[str]:
    """Return the lines sorted by key; lines with equal keys keep their order.

    Leading whitespace is ignored, as the merged key has it stripped too.
    """
    by_key = cmp_to_key(compare_keys)
    return sorted(lines, key=lambda line: by_key(line.lstrip()))


def same_key(key1: str, key2: str) -> bool:
    """Exact, case-sensitive key equality used when merging.

    Sorting folds case but merging does not: ``Key`` and ``key`` end up
    adjacent and are both kept.
    """
    return key1 == key2
