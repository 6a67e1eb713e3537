"""Tests for transformer and validator implementations."""

import pytest

from admin_forms.models.types import Limit, LimitKind, Transformer, Validator
from admin_forms.models.validation_result import ErrorKind
from admin_forms.validation.checks import (
    LIMIT_ERRORS,
    TRANSFORMERS,
    VALIDATORS,
    check_items,
    error_message,
    run_check,
    run_checks,
    transform,
)
from admin_forms.validation.patterns import ERROR_MESSAGES

SAMPLES = ["abc", "  padded  ", " John.Doe@EXAMPLE.org ", "a b\tc\n", "", "MiXeD Case "]


class TestCoverage:
    """Every closed-set member has an implementation."""

    def test_all_transformers_implemented(self):
        assert set(TRANSFORMERS) == set(Transformer)

    def test_all_validators_implemented(self):
        assert set(VALIDATORS) == set(Validator)

    def test_all_limits_implemented(self):
        assert set(LIMIT_ERRORS) == set(LimitKind)

    def test_all_errors_have_messages(self):
        assert set(ERROR_MESSAGES) == {kind.value for kind in ErrorKind}


class TestTransformers:
    """Tests for input normalisation."""

    @pytest.mark.parametrize("transformer", list(Transformer))
    @pytest.mark.parametrize("value", SAMPLES)
    def test_idempotent(self, transformer, value):
        """Test reapplying a transformer to its own output is a no-op."""
        once = transform(value, (transformer,))
        assert transform(once, (transformer,)) == once

    def test_trim(self):
        assert transform("abc", (Transformer.TRIM,)) == transform(
            transform("abc", (Transformer.TRIM,)), (Transformer.TRIM,)
        )
        assert transform(" 0.0.0.0:25 ", (Transformer.TRIM,)) == "0.0.0.0:25"

    def test_trim_end(self):
        assert transform("  a  ", (Transformer.TRIM_END,)) == "  a"

    def test_remove_spaces_then_lowercase(self):
        """Test transformers apply in declared order."""
        value = transform(
            " John.Doe@EXAMPLE.org ",
            (Transformer.REMOVE_SPACES, Transformer.LOWERCASE),
        )
        assert value == "john.doe@example.org"

    def test_remove_spaces_all_whitespace(self):
        assert transform("a b\tc\n", (Transformer.REMOVE_SPACES,)) == "abc"

    def test_uppercase(self):
        assert transform("smtp", (Transformer.UPPERCASE,)) == "SMTP"


class TestValidators:
    """Tests for individual checks."""

    def test_required(self):
        assert run_check("", Validator.REQUIRED) == ErrorKind.REQUIRED
        assert run_check("x", Validator.REQUIRED) is None

    @pytest.mark.parametrize("validator", [v for v in Validator if v != Validator.REQUIRED])
    def test_optional_checks_pass_on_empty(self, validator):
        """Test non-required checks accept an empty value."""
        assert run_check("", validator) is None

    @pytest.mark.parametrize("value", ["0.0.0.0:25", "127.0.0.1:8080", "[::]:143", "[::1]:993"])
    def test_socket_addr_valid(self, value):
        assert run_check(value, Validator.IS_SOCKET_ADDR) is None

    @pytest.mark.parametrize(
        "value",
        [
            "bad-address",
            "0.0.0.0",
            "0.0.0.0:99999",
            "::1:25",
            "host:25",
            "[::1]25",
            "1.2.3.4:\u00b2",
            "[::1]:\u00b2",
        ],
    )
    def test_socket_addr_invalid(self, value):
        assert run_check(value, Validator.IS_SOCKET_ADDR) == ErrorKind.INVALID_SOCKET_ADDR

    def test_url(self):
        assert run_check("https://mail.example.org", Validator.IS_URL) is None
        assert run_check("http://localhost:8080", Validator.IS_URL) is None
        assert run_check("mail.example.org", Validator.IS_URL) == ErrorKind.INVALID_URL

    def test_email(self):
        assert run_check("john.doe@example.org", Validator.IS_EMAIL) is None
        assert run_check("john.doe@", Validator.IS_EMAIL) == ErrorKind.INVALID_EMAIL

    def test_host(self):
        assert run_check("mail.example.org", Validator.IS_HOST) is None
        assert run_check("::1", Validator.IS_HOST) is None
        assert run_check("-bad-.org", Validator.IS_HOST) == ErrorKind.INVALID_HOST

    def test_ip_or_mask(self):
        assert run_check("10.0.0.0/8", Validator.IS_IP_OR_MASK) is None
        assert run_check("192.168.1.1", Validator.IS_IP_OR_MASK) is None
        assert run_check("2001:db8::/32", Validator.IS_IP_OR_MASK) is None
        assert run_check("10.0.0.0/99", Validator.IS_IP_OR_MASK) == ErrorKind.INVALID_IP_OR_MASK

    def test_port(self):
        assert run_check("25", Validator.IS_PORT) is None
        assert run_check("0", Validator.IS_PORT) == ErrorKind.INVALID_PORT
        assert run_check("70000", Validator.IS_PORT) == ErrorKind.INVALID_PORT

    def test_port_superscript_digit(self):
        """Test digits that int() cannot parse are rejected rather than raising."""
        assert run_check("\u00b2", Validator.IS_PORT) == ErrorKind.INVALID_PORT
        assert run_check("2\u00b2", Validator.IS_PORT) == ErrorKind.INVALID_PORT

    def test_number(self):
        assert run_check("-12", Validator.IS_NUMBER) is None
        assert run_check("12a", Validator.IS_NUMBER) == ErrorKind.INVALID_NUMBER

    def test_duration(self):
        for value in ["1m", "30s", "500ms", "1d", "250"]:
            assert run_check(value, Validator.IS_DURATION) is None
        assert run_check("soon", Validator.IS_DURATION) == ErrorKind.INVALID_DURATION

    def test_size(self):
        for value in ["1024", "10k", "5mb", "1 GB"]:
            assert run_check(value, Validator.IS_SIZE) is None
        assert run_check("big", Validator.IS_SIZE) == ErrorKind.INVALID_SIZE


class TestLimits:
    """Tests for range and length checks."""

    def test_length(self):
        assert run_check("ab", Limit.min_length(3)) == ErrorKind.TOO_SHORT
        assert run_check("abc", Limit.min_length(3)) is None
        assert run_check("abcd", Limit.max_length(3)) == ErrorKind.TOO_LONG

    def test_value(self):
        assert run_check("300", Limit.max_value(255)) == ErrorKind.TOO_LARGE
        assert run_check("0", Limit.min_value(1)) == ErrorKind.TOO_SMALL
        assert run_check("64", Limit.max_value(255)) is None
        assert run_check("abc", Limit.max_value(255)) == ErrorKind.INVALID_NUMBER

    def test_items(self):
        assert check_items(1, Limit.min_items(2)) == ErrorKind.TOO_FEW_ITEMS
        assert check_items(3, Limit.max_items(2)) == ErrorKind.TOO_MANY_ITEMS
        assert check_items(2, Limit.max_items(2)) is None

    def test_message_includes_bound(self):
        assert error_message(ErrorKind.TOO_SHORT, Limit.min_length(3)) == (
            "Must be at least 3 characters long"
        )
        assert error_message(ErrorKind.REQUIRED) == "This field is required"


class TestRunChecks:
    """Tests for ordered, fail-fast checking."""

    def test_first_failure_wins(self):
        failure = run_checks("", (Validator.REQUIRED, Validator.IS_SOCKET_ADDR))
        assert failure == (ErrorKind.REQUIRED, Validator.REQUIRED)

    def test_later_check_fails(self):
        failure = run_checks("bad-address", (Validator.REQUIRED, Validator.IS_SOCKET_ADDR))
        assert failure == (ErrorKind.INVALID_SOCKET_ADDR, Validator.IS_SOCKET_ADDR)

    def test_item_limits_skipped_per_value(self):
        assert run_checks("a", (Limit.min_items(2),)) is None

    def test_all_pass(self):
        assert run_checks("0.0.0.0:25", (Validator.REQUIRED, Validator.IS_SOCKET_ADDR)) is None
