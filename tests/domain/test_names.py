"""Tests for case-insensitive name comparison."""

from marinactl.domain.names import compare_names, name_sort_key, names_match


class TestCompareNames:
    def test_equal_ignoring_case(self) -> None:
        assert compare_names("alice", "ALICE") == 0
        assert compare_names("Alice", "aLiCe") == 0

    def test_ordering(self) -> None:
        assert compare_names("Ann", "bob") < 0
        assert compare_names("bob", "Ann") > 0

    def test_prefix_sorts_first(self) -> None:
        assert compare_names("bob", "Bobby") < 0
        assert compare_names("Bobby", "bob") > 0

    def test_empty(self) -> None:
        assert compare_names("", "") == 0
        assert compare_names("", "a") < 0

    def test_difference_of_first_folded_characters(self) -> None:
        assert compare_names("Ac", "aA") == ord("c") - ord("a")


class TestNamesMatch:
    def test_match(self) -> None:
        assert names_match("Rascal", "rascal")
        assert not names_match("Rascal", "Rascals")


class TestNameSortKey:
    def test_sorted_case_insensitively(self) -> None:
        names = ["delta", "Alpha", "charlie", "Bravo"]
        assert sorted(names, key=name_sort_key) == ["Alpha", "Bravo", "charlie", "delta"]
