from __future__ import annotations

import pytest

from src.ops_dashboard.ops_dashboard.common.validators import parse_amount, require_positive_amount
from src.ops_dashboard.ops_dashboard.core.exceptions import ValidationError


def test_parse_amount_accepts_numbers_and_defaults_blank():
    assert parse_amount("12.5", "Rate") == 12.5
    assert parse_amount(7, "Rate") == 7.0
    assert parse_amount("  ", "Rate", default=0) == 0
    with pytest.raises(ValidationError):
        parse_amount("", "Rate")


@pytest.mark.parametrize("value", ["nan", "NaN", "inf", "-Infinity", "1e999", float("nan"), float("inf")])
def test_parse_amount_rejects_non_finite(value):
    with pytest.raises(ValidationError):
        parse_amount(value, "Rate", default=0)


@pytest.mark.parametrize("value", ["0", "-5", "abc", "inf"])
def test_require_positive_amount_rejects(value):
    with pytest.raises(ValidationError):
        require_positive_amount(value, "Amount")
