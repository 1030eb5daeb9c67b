import pytest

from shift_logger.console.pagination import Paginator
from shift_logger.core.enums import PageNavigation


def test_twenty_five_items_make_three_pages():
    paginator = Paginator(list(range(25)), page_size=10)

    assert paginator.page_count == 3
    assert paginator.header() == "Page 1 of 3 (showing 10 of 25)"
    assert paginator.choices() == [PageNavigation.EXIT, PageNavigation.NEXT]

    assert paginator.navigate("Next")
    assert paginator.navigate(PageNavigation.NEXT)
    assert paginator.current_page() == [20, 21, 22, 23, 24]
    assert paginator.header() == "Page 3 of 3 (showing 5 of 25)"
    assert paginator.choices() == [PageNavigation.PREVIOUS, PageNavigation.EXIT]


def test_middle_page_offers_both_directions():
    paginator = Paginator(list(range(25)), page_size=10)
    paginator.navigate("Next")

    assert paginator.choices() == [PageNavigation.PREVIOUS, PageNavigation.EXIT, PageNavigation.NEXT]
    assert paginator.navigate("Previous")
    assert paginator.page_number == 1


def test_exit_ends_navigation():
    paginator = Paginator(["a"], page_size=10)

    assert paginator.choices() == [PageNavigation.EXIT]
    assert paginator.navigate("Exit") is False


def test_unavailable_or_unknown_choices_are_rejected():
    paginator = Paginator(list(range(5)), page_size=10)

    with pytest.raises(ValueError):
        paginator.navigate("Next")
    with pytest.raises(ValueError):
        paginator.navigate("Sideways")
    assert paginator.page_number == 1


def test_empty_list_still_has_one_page():
    paginator = Paginator([], page_size=10)

    assert paginator.page_count == 1
    assert paginator.current_page() == []


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        Paginator([1, 2, 3], page_size=0)
