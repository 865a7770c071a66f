from __future__ import annotations

import pytest

from src.hrms.hrms.common.pagination import PageRequest
from src.hrms.hrms.core.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from src.hrms.hrms.core.exceptions import ValidationError


def test_no_args_means_unpaginated():
    page = PageRequest.from_args({})
    assert page.limit is None
    assert page.sql() == ("", ())
    assert page.apply([1, 2, 3]) == [1, 2, 3]


def test_page_and_limit():
    page = PageRequest.from_args({"page": "2", "limit": "2"})
    assert page.offset == 2
    assert page.sql() == (" LIMIT %s OFFSET %s", (2, 2))
    assert page.apply([1, 2, 3, 4, 5]) == [3, 4]


def test_limit_defaults_and_is_capped():
    assert PageRequest.from_args({"page": "1"}).limit == DEFAULT_PAGE_LIMIT
    assert PageRequest.from_args({"limit": "100000"}).limit == MAX_PAGE_LIMIT


@pytest.mark.parametrize("args", [{"page": "x"}, {"page": "0"}, {"limit": "-1"}])
def test_bad_values(args):
    with pytest.raises(ValidationError):
        PageRequest.from_args(args)
