"""
Records remembered between visits of the administration console.

``SavedLogin`` is kept in durable client storage when "remember me" is
checked; ``AuthSession`` lives for the browser session. The storage itself
belongs to the page layer; this module only defines the record shapes and
an in-process keyed store standing in for it.
"""

from typing import TypeVar

from pydantic import BaseModel, Field

from admin_forms.forms import FormData

STATE_LOGIN_NAME_KEY = "login_name"
STATE_STORAGE_KEY = "session"


class SavedLogin(BaseModel):
    """Remembered login name and server URL."""

    login: str = Field(default="")
    base_url: str = Field(default="")


class AuthSession(BaseModel):
    """Tokens and identity of the signed-in administrator."""

    access_token: str = Field(default="", repr=False)
    refresh_token: str = Field(default="", repr=False)
    base_url: str = Field(default="")
    username: str = Field(default="")
    is_valid: bool = Field(default=False)
    is_admin: bool = Field(default=False)


RecordT = TypeVar("RecordT", bound=BaseModel)

# Key: storage key, Value: JSON-serialised record
stored_records: dict[str, str] = {}


def save_record(key: str, record: BaseModel) -> None:
    """Store a record under ``key``."""
    stored_records[key] = record.model_dump_json()


def load_record(key: str, model: type[RecordT]) -> RecordT | None:
    """Get the record stored under ``key``, or None."""
    data = stored_records.get(key)
    if data is None:
        return None
    return model.model_validate_json(data)


def delete_record(key: str) -> None:
    stored_records.pop(key, None)


def seed_login_form(form: FormData) -> FormData:
    """Pre-fill a login form from the remembered login, if any."""
    saved = load_record(STATE_LOGIN_NAME_KEY, SavedLogin) or SavedLogin()
    return form.with_value("base-url", saved.base_url).with_value("login", saved.login)


def remember_login(form: FormData, remember: bool) -> None:
    """Persist or forget the login of a validated login form."""
    if remember:
        save_record(
            STATE_LOGIN_NAME_KEY,
            SavedLogin(
                login=form.value("login") or "",
                base_url=form.value("base-url") or "",
            ),
        )
    else:
        delete_record(STATE_LOGIN_NAME_KEY)
