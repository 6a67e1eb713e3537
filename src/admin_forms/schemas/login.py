"""Sign-in form."""

from admin_forms.builder import SchemaSetBuilder
from admin_forms.models.types import Transformer, Type, Validator


def build_login(builder: SchemaSetBuilder) -> SchemaSetBuilder:
    return (
        builder.new_schema("login")
        .names("login", "logins")
        .new_field("login")
        .label("Login")
        .placeholder("user@example.org")
        .typ(Type.INPUT)
        .input_check(
            [Transformer.REMOVE_SPACES, Transformer.LOWERCASE],
            [Validator.REQUIRED],
        )
        .build()
        .new_field("password")
        .label("Password")
        .typ(Type.SECRET)
        .input_check([], [Validator.REQUIRED])
        .build()
        .new_field("base-url")
        .label("Host")
        .placeholder("https://mail.example.org")
        .input_check([Transformer.TRIM], [Validator.IS_URL])
        .build()
        .build()
    )
