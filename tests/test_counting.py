import pytest

from algodrills.counting import (
    can_construct,
    dest_city,
    find_duplicate,
    find_lhs,
    find_special_integer,
    find_the_difference,
    finding_users_active_minutes,
    first_uniq_char,
    is_anagram,
    longest_palindrome,
    majority_element,
    num_identical_pairs,
    single_number_iii,
    sum_of_unique,
    top_k_frequent,
)


def test_majority_element():
    assert majority_element([9, 9, 2, 2, 2, 9, 9]) == 9
    assert majority_element([3, 2, 3]) == 3


def test_majority_element_none():
    assert majority_element([1, 2, 3, 4]) == 0


@pytest.mark.parametrize(
    "s, t, expected",
    [("anagram", "nagaram", True), ("rat", "car", False), ("a", "ab", True)],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_find_duplicate():
    assert find_duplicate([3, 1, 3, 4, 2]) == 3
    assert find_duplicate([1, 3, 4, 2, 2]) == 2


def test_find_duplicate_without_repeat():
    assert find_duplicate([5, 6, 7]) == 1


def test_single_number_iii():
    assert single_number_iii([1, 2, 1, 3, 2, 5]) == [3, 5]
    assert single_number_iii([4, 4]) == []


def test_top_k_frequent():
    assert top_k_frequent([1, 1, 2, 2, 2, 2, 5, 5, 5, 7], 2) == [2, 5]


def test_top_k_frequent_pads_missing():
    assert top_k_frequent([1], 2) == [1, -1]
    assert top_k_frequent([1, 2], 0) == []


def test_can_construct():
    assert can_construct("help", "padelsh") is True
    assert can_construct("aa", "ab") is False


def test_first_uniq_char():
    assert first_uniq_char("leetcode") == 0
    assert first_uniq_char("aabb") == -1


def test_first_uniq_char_invariant():
    s = "loveleetcode"
    index = first_uniq_char(s)
    assert s.count(s[index]) == 1
    assert all(s.count(c) > 1 for c in s[:index])


def test_find_the_difference():
    assert find_the_difference("abcd", "badce") == "e"
    assert find_the_difference("", "y") == "y"
    assert find_the_difference("ab", "ba") == " "


def test_longest_palindrome():
    assert longest_palindrome("abccccdd") == 7


def test_longest_palindrome_whole_string():
    assert longest_palindrome("abab") == len("abab")
    assert longest_palindrome("a") == len("a")


def test_find_lhs():
    assert find_lhs([1, 3, 2, 2, 5, 2, 3, 7]) == 5
    assert find_lhs([1, 1, 1, 1]) == 0
    assert find_lhs([1, 2, 2, 1]) == len([1, 2, 2, 1])


def test_find_special_integer():
    assert find_special_integer([1, 2, 2, 6, 6, 6, 6, 7, 10]) == 6
    assert find_special_integer([1, 1]) == 1


def test_num_identical_pairs():
    assert num_identical_pairs([1, 2, 3, 1, 1, 3]) == 4
    assert num_identical_pairs([1, 2, 3]) == 0


def test_num_identical_pairs_grows_with_copies():
    base = num_identical_pairs([7, 7, 7])
    assert num_identical_pairs([7, 7, 7, 7]) - base == len([7, 7, 7])


def test_sum_of_unique():
    assert sum_of_unique([1, 2, 3]) == sum([1, 2, 3])
    assert sum_of_unique([4, 4]) == 0
    assert sum_of_unique([1, 2, 3, 4, 4, 5]) == sum([1, 2, 3, 5])


def test_finding_users_active_minutes():
    logs = [[0, 5], [1, 2], [0, 2], [0, 5], [1, 3]]
    result = finding_users_active_minutes(logs, 5)
    assert len(result) == 5
    assert result[1] == 2
    assert sum(result) == 2


def test_finding_users_active_minutes_leaves_out_busy_users():
    logs = [[0, 1], [0, 2], [0, 3], [1, 1]]
    assert finding_users_active_minutes(logs, 2) == [1, 0]


def test_dest_city():
    paths = [["London", "New York"], ["New York", "Lima"], ["Lima", "Sao Paulo"]]
    assert dest_city(paths) == "Sao Paulo"


def test_dest_city_none():
    with pytest.raises(ValueError):
        dest_city([["A", "B"], ["B", "A"]])