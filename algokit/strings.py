"""String algorithms: counting, parsing, searching and rearranging text."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence
from itertools import groupby

MOD = 10**9 + 7
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def beauty_sum(s: str) -> int:
    """Sum, over every substring, of its highest minus lowest letter count."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            values = counts.values()
            total += max(values) - min(values)
    return total


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of ``s1`` is a substring of ``s2``."""
    size = len(s1)
    if not s2 or size > len(s2):
        return False
    wanted = Counter(s1)
    window = Counter(s2[:size])
    if window == wanted:
        return True
    for i in range(size, len(s2)):
        window[s2[i]] += 1
        leaving = s2[i - size]
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        if window == wanted:
            return True
    return False


def compress(chars: MutableSequence[str]) -> int:
    """Run-length compress ``chars`` in place and return its new length.

    Each run becomes its character followed by the run length when that
    length is more than one.
    """
    result: list[str] = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        result.append(ch)
        if count > 1:
            result.extend(str(count))
    chars[:] = result
    return len(result)


def mod_exp(base: int, exp: int, mod: int) -> int:
    """Return ``base ** exp`` reduced modulo ``mod`` by repeated squaring."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    base %= mod
    while exp > 0:
        if exp & 1:
            result = result * base % mod
        base = base * base % mod
        exp >>= 1
    return result


def count_good_numbers(n: int) -> int:
    """Count digit strings of length ``n`` with even digits at even indices
    and prime digits at odd indices, modulo 1e9+7."""
    if n == 1:
        return 5
    even_count = (n + 1) // 2
    odd_count = n // 2
    return mod_exp(5, even_count, MOD) * mod_exp(4, odd_count, MOD) % MOD


def frequency_sort(s: str) -> str:
    """Rearrange ``s`` so that more frequent characters come first.

    Characters with the same count are ordered from the highest code point.
    """
    ranked = sorted(
        ((count, ch) for ch, count in Counter(s).items()), reverse=True
    )
    return "".join(ch * count for count, ch in ranked)


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the characters of ``s``."""
    return Counter(s) == Counter(t)


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of the digit string ``num`` that is odd."""
    for i in range(len(num) - 1, -1, -1):
        if int(num[i]) % 2:
            return num[: i + 1]
    return ""


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    n = len(s)
    if n < 2:
        return s
    start, best = 0, 1

    def expand(left: int, right: int) -> None:
        nonlocal start, best
        while left >= 0 and right < n and s[left] == s[right]:
            length = right - left + 1
            if length > best:
                best, start = length, left
            left -= 1
            right += 1

    for i in range(n - 1):
        expand(i, i)
        expand(i, i + 1)
    return s[start : start + best]


def max_depth(s: str) -> int:
    """Return the deepest nesting of parentheses in ``s`` (0 if none close)."""
    current = deepest = 0
    for ch in s:
        if ch == "(":
            current += 1
        elif ch == ")":
            deepest = max(deepest, current)
            current -= 1
    return deepest


def my_atoi(s: str) -> int:
    """Parse a leading signed integer from ``s``, clamped to 32 bits.

    Leading spaces are skipped, one optional sign is read, then digits up to
    the first non-digit. Text without leading digits gives 0.
    """
    i, n = 0, len(s)
    while i < n and s[i] == " ":
        i += 1
    sign = 1
    if i < n and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < n and "0" <= s[i] <= "9":
        value = value * 10 + ord(s[i]) - ord("0")
        if value > INT_MAX:
            return INT_MIN if sign < 0 else INT_MAX
        i += 1
    return value * sign


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly delete the leftmost occurrence of ``part`` from ``s``."""
    if not part:
        raise ValueError("part must not be empty")
    while s and part in s:
        s = s.replace(part, "", 1)
    return s


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order."""
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("string holds no words")
    return " ".join(reversed(words))


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None
    total = 0
    for i, value in enumerate(values):
        if i + 1 < len(values) and value < values[i + 1]:
            total -= value
        else:
            total += value
    return total


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether some rotation of ``s`` equals ``goal``."""
    return len(s) == len(goal) and goal in s + s


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and
    anything that is not an ASCII letter or digit."""
    cleaned = [ch.lower() for ch in s if _is_alnum(ch)]
    return cleaned == cleaned[::-1]