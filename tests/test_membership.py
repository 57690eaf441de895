from algodrills.membership import (
    check_if_exist,
    contains_duplicate,
    distribute_candies,
    find_disappeared_numbers,
    longest_consecutive,
    missing_number,
    num_jewels_in_stones,
)


def test_contains_duplicate():
    assert not contains_duplicate([1, 2, 3, 5])
    assert contains_duplicate([1, 2, 3, 1])
    assert not contains_duplicate([])


def test_missing_number_invariant():
    nums = [3, 0, 1]
    result = missing_number(nums)
    assert result not in nums
    assert set(range(result)) <= set(nums)


def test_missing_number_full_range():
    nums = [0, 1, 2]
    assert missing_number(nums) == len(nums)


def test_find_disappeared_numbers():
    nums = [4, 3, 2, 7, 8, 2, 3, 1]
    result = find_disappeared_numbers(nums)
    assert set(result).isdisjoint(nums)
    assert set(result) | set(nums) >= set(range(1, len(nums) + 1))
    assert result == sorted(result)
    assert all(1 <= value <= len(nums) for value in result)


def test_find_disappeared_numbers_small():
    assert find_disappeared_numbers([1, 1]) == [2]


def test_distribute_candies_limited_by_kinds():
    candies = [1, 1, 2, 2, 3, 3]
    assert distribute_candies(candies) == len(set(candies))
    same = [6, 6, 6, 6]
    assert distribute_candies(same) == len(set(same))


def test_distribute_candies_limited_by_half():
    candies = [1, 2, 3, 4, 5, 6, 7, 8]
    assert distribute_candies(candies) == len(candies) // 2


def test_num_jewels_in_stones():
    assert num_jewels_in_stones("aA", "aAAbbbb") == 3
    assert not num_jewels_in_stones("z", "ZZ")


def test_check_if_exist():
    assert check_if_exist([10, 2, 5, 3])
    assert not check_if_exist([3, 1, 7, 11])
    assert check_if_exist([0, 0])
    assert not check_if_exist([0])
    assert check_if_exist([-2, -1])


def test_longest_consecutive():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([]) == 0


def test_longest_consecutive_with_duplicates():
    nums = [1, 2, 2, 3]
    assert longest_consecutive(nums) == len(set(nums))


def test_longest_consecutive_order_independent():
    nums = [9, 1, 4, 7, 3, -1, 0, 5, 8, -1, 6]
    assert longest_consecutive(nums) == longest_consecutive(sorted(nums))
    assert longest_consecutive(nums) <= len(set(nums))