import pytest

from costar.common.iter import chunked


def test_chunked_splits_frontier_ids():
    ids = list(range(10))
    assert list(chunked(ids, 4)) == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9]]


def test_chunked_exact_multiple_has_no_empty_tail():
    assert list(chunked([1, 2, 3, 4], 2)) == [[1, 2], [3, 4]]


def test_chunked_empty_input():
    assert list(chunked([], 3)) == []


def test_chunked_generator_input():
    def gen():
        for i in range(5):
            yield i * i

    assert list(chunked(gen(), 2)) == [[0, 1], [4, 9], [16]]


def test_chunked_rejects_non_positive_size():
    with pytest.raises(ValueError):
        list(chunked([1, 2], 0))
