import pytest

from docsearch.paginator import Paginator, paginate


def test_pages_have_page_size_except_last():
    pages = list(paginate([1, 2, 3, 4, 5], 2))
    assert [len(page) for page in pages] == [2, 2, 1]


def test_pages_concatenate_to_original():
    items = list(range(17))
    pages = paginate(items, 4)
    assert [x for page in pages for x in page] == items


def test_len_counts_pages():
    assert len(Paginator(range(10), 5)) == 2
    assert len(Paginator(range(11), 5)) == 3


def test_empty_input_has_no_pages():
    assert len(paginate([], 3)) == 0
    assert list(paginate([], 3)) == []


def test_page_size_larger_than_input_gives_one_page():
    assert list(paginate("abc", 10)) == [["a", "b", "c"]]


def test_zero_page_size_rejected():
    with pytest.raises(ValueError):
        paginate([1, 2], 0)