"""
Tests for the token-driven pagination helpers.
"""

from typing import Dict, List, Optional, Tuple
from unittest.mock import Mock

import pytest

from aws_common.pagination import paginate


def make_fetcher(pages: Dict[Optional[str], Tuple[List[int], Optional[str]]]) -> Mock:
    """Build a page fetcher backed by a token -> page mapping."""
    return Mock(side_effect=lambda token: pages[token])


class TestPaginate:
    """Test paginate."""

    def test_single_page(self) -> None:
        """A page without a continuation token ends enumeration."""
        fetch = make_fetcher({None: ([1, 2, 3], None)})

        assert list(paginate(fetch)) == [1, 2, 3]
        fetch.assert_called_once_with(None)

    def test_follows_tokens_in_order(self) -> None:
        """Items from every page are returned in page order."""
        fetch = make_fetcher(
            {
                None: ([1, 2], "t1"),
                "t1": ([3], "t2"),
                "t2": ([4, 5, 6], None),
            }
        )

        items = list(paginate(fetch))

        assert items == [1, 2, 3, 4, 5, 6]
        assert [c.args[0] for c in fetch.call_args_list] == [None, "t1", "t2"]

    @pytest.mark.parametrize("page_sizes", [[0], [2, 0, 3], [5, 5, 5, 1]])
    def test_length_is_sum_of_pages(self, page_sizes: List[int]) -> None:
        """The result length equals the sum of the page sizes."""
        pages = {}
        for i, size in enumerate(page_sizes):
            token = None if i == 0 else f"t{i}"
            next_token = f"t{i + 1}" if i + 1 < len(page_sizes) else None
            pages[token] = (list(range(size)), next_token)
        fetch = make_fetcher(pages)

        assert len(list(paginate(fetch))) == sum(page_sizes)
        assert fetch.call_count == len(page_sizes)

    def test_empty_string_token_ends_enumeration(self) -> None:
        """An empty token is treated the same as a missing one."""
        fetch = make_fetcher({None: (["a"], "")})

        assert list(paginate(fetch)) == ["a"]
        assert fetch.call_count == 1

    def test_no_calls_after_termination(self) -> None:
        """Exhausting the generator does not trigger any further fetches."""
        fetch = make_fetcher({None: (["a"], "t1"), "t1": (["b"], None)})
        pages = paginate(fetch)

        assert list(pages) == ["a", "b"]
        assert list(pages) == []
        assert fetch.call_count == 2

    def test_is_lazy(self) -> None:
        """Nothing is fetched until the generator is consumed."""
        fetch = make_fetcher({None: (["a"], None)})

        pages = paginate(fetch)
        fetch.assert_not_called()

        assert next(pages) == "a"
        fetch.assert_called_once()

    def test_start_token(self) -> None:
        """Enumeration can resume from a given token."""
        fetch = make_fetcher({"t1": (["b"], None)})

        assert list(paginate(fetch, start_token="t1")) == ["b"]
