"""
Patterns and message templates used by the validation checks.

Centralising these keeps the check implementations short and makes the
user-facing wording easy to review.
"""

import re

# Field ids: dotted, dashed identifiers such as "tls.disable-protocols" or "_id"
VALID_FIELD_ID = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_.\-]*$")

EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

HOSTNAME = re.compile(
    r"^(?=.{1,253}$)(?!-)[a-zA-Z0-9-]{1,63}(?<!-)(\.(?!-)[a-zA-Z0-9-]{1,63}(?<!-))*\.?$"
)

INTEGER = re.compile(r"^-?\d+$")

# Port numbers: ASCII digits only
PORT_DIGITS = re.compile(r"\d{1,5}", re.ASCII)

# "30s", "1m", "500ms", "1d", or a bare number of milliseconds
DURATION = re.compile(r"^\d+\s*(ms|s|m|h|d)?$", re.IGNORECASE)

# "1024", "10k", "5mb", "1 GB"
SIZE = re.compile(r"^\d+\s*(b|k|kb|m|mb|g|gb)?$", re.IGNORECASE)

BOOLEAN_VALUES = ("true", "false")

ERROR_MESSAGES = {
    "required": "This field is required",
    "invalid_url": "Invalid URL",
    "invalid_socket_addr": "Invalid socket address, expected ip:port",
    "invalid_email": "Invalid e-mail address",
    "invalid_host": "Invalid hostname",
    "invalid_ip_or_mask": "Invalid IP address or network mask",
    "invalid_port": "Invalid port number",
    "invalid_number": "Invalid number",
    "invalid_duration": "Invalid duration, expected a number followed by ms, s, m, h or d",
    "invalid_size": "Invalid size, expected a number followed by k, m or g",
    "invalid_boolean": "Expected true or false",
    "invalid_selection": "Invalid selection",
    "too_short": "Must be at least {limit} characters long",
    "too_long": "Must be at most {limit} characters long",
    "too_small": "Must be at least {limit}",
    "too_large": "Must be at most {limit}",
    "too_few_items": "At least {limit} items are required",
    "too_many_items": "At most {limit} items are allowed",
}
