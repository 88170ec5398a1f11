import random

import pytest

from leetkit.strings import (
    common_chars,
    convert,
    find_anagrams,
    group_anagrams,
    is_anagram,
    is_anagram_counts,
    is_happy,
    length_of_longest_substring,
    partition_labels,
    reverse_words,
)

SAMPLES = ["", "a", "abba", "abcabcbb", "bbbbb", "pwwkew", "dvdf", "anagram", "nagaram"]


@pytest.mark.parametrize("s", SAMPLES)
def test_longest_substring_is_achieved_and_maximal(s):
    best = length_of_longest_substring(s)
    windows = [s[i : i + best] for i in range(len(s) - best + 1)]
    assert any(len(set(w)) == len(w) for w in windows)
    longer = [s[i : i + best + 1] for i in range(len(s) - best)]
    assert all(len(set(w)) < len(w) for w in longer)


def test_longest_substring_of_empty_string():
    assert length_of_longest_substring("") == len("")


def test_convert_known_example():
    assert convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@pytest.mark.parametrize("rows", [1, 2, 3, 4, 7])
def test_convert_is_a_permutation(rows):
    text = "PAYPALISHIRING"
    assert sorted(convert(text, rows)) == sorted(text)


def test_convert_single_row_or_many_rows_is_identity():
    assert convert("abcdef", 1) == "abcdef"
    assert convert("abcdef", 6) == "abcdef"
    assert convert("abcdef", 10) == "abcdef"


def test_group_anagrams_invariants():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    keys = ["".join(sorted(g[0])) for g in groups]
    assert len(set(keys)) == len(groups)
    for group in groups:
        assert len({"".join(sorted(w)) for w in group}) == 1


def test_group_anagrams_keeps_first_appearance_order():
    groups = group_anagrams(["eat", "tea", "tan"])
    assert groups[0] == ["eat", "tea"]
    assert groups[1] == ["tan"]


@pytest.mark.parametrize("s", ["the sky is blue", "  hello world  ", "a good   example", "single"])
def test_reverse_words_reverses_word_order(s):
    result = reverse_words(s)
    assert result.split(" ") == list(reversed(s.split()))
    assert reverse_words(result) == " ".join(s.split())


@pytest.mark.parametrize("k", range(0, 6))
def test_powers_of_ten_are_happy(k):
    assert is_happy(10**k) is True


def test_unhappy_number():
    assert is_happy(4) is False


@pytest.mark.parametrize("n", [7, 19, 23, 28, 2, 3, 4, 1234])
def test_happiness_depends_only_on_digit_multiset(n):
    reordered = int(str(n)[::-1])
    assert is_happy(n) == is_happy(reordered)


def test_is_anagram_source_example():
    assert is_anagram("anagram", "nagaram")
    assert is_anagram_counts("anagram", "nagaram")


def test_is_anagram_shuffled_and_mismatched():
    rng = random.Random(7)
    word = "mississippi"
    letters = list(word)
    rng.shuffle(letters)
    shuffled = "".join(letters)
    assert is_anagram(word, shuffled)
    assert is_anagram_counts(word, shuffled)
    assert not is_anagram(word, word[:-1])
    assert not is_anagram("rat", "car")
    assert not is_anagram_counts("rat", "car")


def test_is_anagram_counts_rejects_non_lowercase():
    with pytest.raises(ValueError):
        is_anagram_counts("Abc", "cbA")


@pytest.mark.parametrize("s,p", [("cbaebabacd", "abc"), ("abab", "ab"), ("aaaa", "aa"), ("xyz", "q")])
def test_find_anagrams_matches_definition(s, p):
    found = find_anagrams(s, p)
    for i in range(len(s) - len(p) + 1):
        is_match = sorted(s[i : i + len(p)]) == sorted(p)
        assert (i in found) == is_match


def test_find_anagrams_short_text():
    assert find_anagrams("ab", "abc") == []


def test_partition_labels_known_example():
    assert partition_labels("ababcbacadefegdehijhklij") == [9, 7, 8]


@pytest.mark.parametrize("s", ["ababcbacadefegdehijhklij", "eccbbbbdec", "abc", "a"])
def test_partition_labels_parts_are_disjoint(s):
    sizes = partition_labels(s)
    assert sum(sizes) == len(s)
    parts = []
    start = 0
    for size in sizes:
        parts.append(set(s[start : start + size]))
        start += size
    assert sum(len(part) for part in parts) == len(set().union(*parts))


def test_common_chars_bounded_by_every_word():
    words = ["bella", "label", "roller"]
    result = common_chars(words)
    assert result == sorted(result)
    for ch in set(result):
        for word in words:
            assert result.count(ch) <= word.count(ch)
    assert set(result) <= set("bella") & set("label") & set("roller")


def test_common_chars_single_word_and_empty():
    assert common_chars(["cool"]) == sorted("cool")
    assert common_chars([]) == []