"""Tests for OperationResult."""

import pytest
from pydantic import ValidationError

from number_theory_utils.models import OperationResult


class TestOperationResult:
    """Test cases for the OperationResult model."""

    def test_matches_expected(self):
        item = OperationResult(operation="gcd", arguments=[56, 98], result=14, expected=14)
        assert item.matches_expected

    def test_mismatch(self):
        item = OperationResult(operation="gcd", arguments=[56, 98], result=7, expected=14)
        assert not item.matches_expected

    def test_bool_does_not_match_int(self):
        item = OperationResult(operation="is_prime", arguments=[2], result=True, expected=1)
        assert isinstance(item.result, bool)
        assert not item.matches_expected

    def test_no_expectation(self):
        item = OperationResult(operation="next_prime", arguments=[17], result=19)
        assert item.expected is None
        assert item.matches_expected

    def test_describe(self):
        item = OperationResult(operation="lcm", arguments=[8, 12], result=24)
        assert item.describe() == "lcm(8, 12) = 24"

    def test_empty_operation_rejected(self):
        with pytest.raises(ValidationError):
            OperationResult(operation="", arguments=[], result=0)
