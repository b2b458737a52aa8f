"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from sqlalchemy import Table

from nationforge_backend.database.schemas import UserSchema


def test_user_schema_email_is_unique() -> None:
    table = cast("Table", UserSchema.__table__)
    assert table.c.email.unique is True
    assert table.c.has_country.nullable is False


def test_user_schema_has_country_defaults_to_false() -> None:
    table = cast("Table", UserSchema.__table__)
    column = table.c.has_country
    assert column.default is not None
    assert column.default.arg is False
    assert column.server_default is not None
