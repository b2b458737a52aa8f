"""Country schema and repository tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, cast
from uuid import uuid4

import pytest
from sqlalchemy import BigInteger, create_engine
from sqlalchemy.orm import Session

from nationforge_backend.database.base import BaseSchema
from nationforge_backend.database.repositories import CountryRepository
from nationforge_backend.database.schemas import CountrySchema, UserSchema
from nationforge_backend.game_logic import (
    ConstructionOrder,
    CountryState,
    CountryStoreError,
    DuplicateCountryError,
    OwnedBuilding,
)
from nationforge_backend.shared import (
    FlagDesign,
    FlagPattern,
    GovernmentType,
    NationalValue,
    ResourceState,
)

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Engine, Table

T0 = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)


def test_country_schema_government_uses_enum_values() -> None:
    table = cast("Table", CountrySchema.__table__)
    government_column = table.c.government
    assert government_column.type.enums == [item.value for item in GovernmentType]


def test_country_schema_enforces_unique_name_and_owner() -> None:
    table = cast("Table", CountrySchema.__table__)
    assert table.c.name.unique is True
    assert table.c.owner_id.unique is True
    assert "values" in table.c


def test_country_schema_resource_totals_are_64_bit() -> None:
    table = cast("Table", CountrySchema.__table__)
    assert isinstance(table.c.population.type, BigInteger)
    assert isinstance(table.c.economy.type, BigInteger)


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    BaseSchema.metadata.create_all(engine)
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()


@pytest.fixture
def file_engine(tmp_path: Path) -> Iterator[Engine]:
    engine = create_engine(f"sqlite:///{tmp_path / 'countries.db'}")
    BaseSchema.metadata.create_all(engine)
    yield engine
    engine.dispose()


def _user(session: Session) -> UserSchema:
    user = UserSchema(
        id=uuid4(),
        username="founder",
        email=f"{uuid4().hex}@example.com",
        password_hash="salt:hash",
        has_country=False,
    )
    session.add(user)
    session.flush()
    return user


def _country(owner: UserSchema, name: str = "Avalon") -> CountryState:
    return CountryState(
        id=uuid4(),
        owner_id=owner.id,
        name=name,
        government=GovernmentType.MONARCHY,
        national_values=(NationalValue.HONOR,),
        flag=FlagDesign(
            background_color="#10B981",
            pattern=FlagPattern.STAR,
            pattern_color="#F59E0B",
        ),
        resources=ResourceState(population=1000, economy=10_000, environment=100),
        last_resource_update=T0,
    )


def test_repository_round_trips_whole_aggregate(session: Session) -> None:
    repository = CountryRepository(session)
    country = repository.add(_country(_user(session)))
    updated = country.model_copy(
        update={
            "buildings": (OwnedBuilding(type="HOUSE", count=2),),
            "construction_queue": (
                ConstructionOrder(
                    building_type="PARK",
                    started_at=T0,
                    completes_at=T0 + timedelta(hours=1),
                ),
            ),
            "last_resource_update": T0 + timedelta(minutes=30),
        }
    )

    repository.save(updated)
    session.expire_all()

    stored = repository.get_by_owner(country.owner_id)
    assert stored == updated
    assert repository.get_by_name("Avalon") == updated
    row = session.get(CountrySchema, country.id)
    assert row is not None
    assert row.version_id == 2


def test_repository_reports_duplicate_names(session: Session) -> None:
    repository = CountryRepository(session)
    repository.add(_country(_user(session)))

    with pytest.raises(DuplicateCountryError):
        repository.add(_country(_user(session)))


def test_repository_delete(session: Session) -> None:
    repository = CountryRepository(session)
    country = repository.add(_country(_user(session)))

    repository.delete(country.id)

    assert repository.get(country.id) is None


def test_repository_stores_totals_beyond_32_bits(session: Session) -> None:
    repository = CountryRepository(session)
    country = repository.add(_country(_user(session)))
    rich = country.with_resources(
        ResourceState(population=3_000_000_000, economy=5_000_000_000, environment=50)
    )

    repository.save(rich)
    session.expire_all()

    stored = CountryRepository(session).get(country.id)
    assert stored is not None
    assert stored.resources == rich.resources


def test_repository_rejects_write_based_on_stale_read(file_engine: Engine) -> None:
    with Session(file_engine) as setup:
        country = CountryRepository(setup).add(_country(_user(setup)))
        setup.commit()

    with Session(file_engine) as first, Session(file_engine) as second:
        first_repository = CountryRepository(first)
        second_repository = CountryRepository(second)
        first_read = first_repository.get(country.id)
        second_read = second_repository.get(country.id)
        assert first_read is not None
        assert second_read is not None

        first_repository.save(
            first_read.with_resources(
                ResourceState(population=1010, economy=10_100, environment=100)
            )
        )
        first.commit()

        with pytest.raises(CountryStoreError):
            second_repository.save(
                second_read.with_resources(
                    ResourceState(population=2000, economy=0, environment=100)
                )
            )
        second.rollback()

    with Session(file_engine) as check:
        stored = CountryRepository(check).get(country.id)
        row = check.get(CountrySchema, country.id)
        assert row is not None
        assert row.version_id == 2

    assert stored is not None
    assert stored.resources.economy == 10_100
