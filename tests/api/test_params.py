"""Tests for query-string coercion."""

import pytest

from product_service.api.params import (
    pagination_params,
    parse_bool,
    parse_float,
    parse_int,
    parse_text,
    product_filters,
)


@pytest.mark.parametrize(
    "raw,expected",
    [("5", 5.0), (" 2.5 ", 2.5), ("-1", -1.0), ("abc", None), ("", None), ("nan", None), ("inf", None), (None, None)],
)
def test_parse_float(raw, expected):
    assert parse_float(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [("3", 3), ("2.0", 2), ("2.5", None), ("x", None), (None, None)],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [("true", True), ("False", False), ("TRUE", True), ("1", None), ("yes", None), (None, None)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_parse_text_treats_empty_as_absent():
    assert parse_text("") is None
    assert parse_text("dairy") == "dairy"


def test_product_filters_ignore_garbage():
    filters = product_filters(
        category="", min_price="cheap", max_price="9.99", in_stock="maybe", search="Milk"
    )

    assert filters.category is None
    assert filters.min_price is None
    assert filters.max_price == 9.99
    assert filters.in_stock is None
    assert filters.search == "Milk"


def test_pagination_params_defaults():
    params = pagination_params(page=None, limit="abc")

    assert (params.page, params.limit) == (1, 10)
