"""
Transformer and validator implementations.

Both tables cover every member of their enum; the pipeline in
``admin_forms.forms`` dispatches through them without a fallback branch.
"""

import ipaddress
from typing import Callable

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from admin_forms.models.types import Check, Limit, LimitKind, Transformer, Validator
from admin_forms.models.validation_result import ErrorKind
from admin_forms.validation.patterns import (
    DURATION,
    EMAIL,
    ERROR_MESSAGES,
    HOSTNAME,
    INTEGER,
    PORT_DIGITS,
    SIZE,
)

_URL = TypeAdapter(AnyHttpUrl)


def _remove_spaces(value: str) -> str:
    return "".join(value.split())


TRANSFORMERS: dict[Transformer, Callable[[str], str]] = {
    Transformer.TRIM: str.strip,
    Transformer.TRIM_END: str.rstrip,
    Transformer.LOWERCASE: str.lower,
    Transformer.UPPERCASE: str.upper,
    Transformer.REMOVE_SPACES: _remove_spaces,
}


def transform(value: str, transformers: tuple[Transformer, ...]) -> str:
    """Apply transformers in declared order."""
    for transformer in transformers:
        value = TRANSFORMERS[transformer](value)
    return value


def _is_url(value: str) -> bool:
    try:
        _URL.validate_python(value)
    except ValidationError:
        return False
    return True


def _is_port(value: str) -> bool:
    return bool(PORT_DIGITS.fullmatch(value)) and 0 < int(value) <= 65535


def _is_socket_addr(value: str) -> bool:
    if value.startswith("["):
        host, sep, port = value[1:].partition("]:")
        version = 6
    else:
        host, sep, port = value.rpartition(":")
        version = 4
    if not sep or not PORT_DIGITS.fullmatch(port) or int(port) > 65535:
        return False
    try:
        return ipaddress.ip_address(host).version == version
    except ValueError:
        return False


def _is_ip_or_mask(value: str) -> bool:
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return True


def _is_host(value: str) -> bool:
    if HOSTNAME.match(value):
        return True
    try:
        ipaddress.ip_address(value.strip("[]"))
    except ValueError:
        return False
    return True


VALIDATORS: dict[Validator, tuple[Callable[[str], bool], ErrorKind]] = {
    Validator.REQUIRED: (bool, ErrorKind.REQUIRED),
    Validator.IS_URL: (_is_url, ErrorKind.INVALID_URL),
    Validator.IS_SOCKET_ADDR: (_is_socket_addr, ErrorKind.INVALID_SOCKET_ADDR),
    Validator.IS_EMAIL: (lambda v: bool(EMAIL.match(v)), ErrorKind.INVALID_EMAIL),
    Validator.IS_HOST: (_is_host, ErrorKind.INVALID_HOST),
    Validator.IS_IP_OR_MASK: (_is_ip_or_mask, ErrorKind.INVALID_IP_OR_MASK),
    Validator.IS_PORT: (_is_port, ErrorKind.INVALID_PORT),
    Validator.IS_NUMBER: (lambda v: bool(INTEGER.match(v)), ErrorKind.INVALID_NUMBER),
    Validator.IS_DURATION: (lambda v: bool(DURATION.match(v)), ErrorKind.INVALID_DURATION),
    Validator.IS_SIZE: (lambda v: bool(SIZE.match(v)), ErrorKind.INVALID_SIZE),
}

LIMIT_ERRORS: dict[LimitKind, ErrorKind] = {
    LimitKind.MIN_LENGTH: ErrorKind.TOO_SHORT,
    LimitKind.MAX_LENGTH: ErrorKind.TOO_LONG,
    LimitKind.MIN_VALUE: ErrorKind.TOO_SMALL,
    LimitKind.MAX_VALUE: ErrorKind.TOO_LARGE,
    LimitKind.MIN_ITEMS: ErrorKind.TOO_FEW_ITEMS,
    LimitKind.MAX_ITEMS: ErrorKind.TOO_MANY_ITEMS,
}


def _check_limit(value: str, limit: Limit) -> ErrorKind | None:
    kind = limit.kind
    if kind == LimitKind.MIN_LENGTH:
        ok = len(value) >= limit.value
    elif kind == LimitKind.MAX_LENGTH:
        ok = len(value) <= limit.value
    else:
        if not INTEGER.match(value):
            return ErrorKind.INVALID_NUMBER
        number = int(value)
        ok = number >= limit.value if kind == LimitKind.MIN_VALUE else number <= limit.value
    return None if ok else LIMIT_ERRORS[kind]


def check_items(count: int, limit: Limit) -> ErrorKind | None:
    """Apply an item-count limit to a whole list."""
    if limit.kind == LimitKind.MIN_ITEMS:
        ok = count >= limit.value
    else:
        ok = count <= limit.value
    return None if ok else LIMIT_ERRORS[limit.kind]


def run_check(value: str, check: Check) -> ErrorKind | None:
    """
    Run one check against a transformed value.

    Every check except ``REQUIRED`` passes on an empty value, so optional
    fields may be left blank.
    """
    if isinstance(check, Limit):
        if not value:
            return None
        return _check_limit(value, check)
    predicate, error = VALIDATORS[check]
    if not value and check != Validator.REQUIRED:
        return None
    return None if predicate(value) else error


def run_checks(value: str, checks: tuple[Check, ...]) -> tuple[ErrorKind, Check] | None:
    """Run checks in order, stopping at the first failure."""
    for check in checks:
        if isinstance(check, Limit) and check.applies_to_list:
            continue
        error = run_check(value, check)
        if error is not None:
            return error, check
    return None


def error_message(error: ErrorKind, check: Check | None = None) -> str:
    limit = check.value if isinstance(check, Limit) else None
    return ERROR_MESSAGES[error.value].format(limit=limit)
