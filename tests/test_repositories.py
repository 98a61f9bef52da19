# tests/test_repositories.py
from datetime import datetime
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from homeapi.db import db
from homeapi.models import Temperature, Switch
from homeapi.repositories.base_repository import StoreError
from homeapi.repositories.resource_repository import (
    TemperatureRepository, SwitchRepository, LightRepository,
)


@pytest.fixture
def temperatures(app_ctx):
    return TemperatureRepository()


@pytest.fixture
def switches(app_ctx):
    return SwitchRepository()


def _temperature(user_id, value, date=None):
    return Temperature(user_id=user_id, value=value, date=date or datetime(2024, 1, 1, 12, 0, 0))


def test_create_assigns_id_and_reads_back(temperatures, new_user):
    created = temperatures.create(_temperature(new_user['id'], 21.5))

    assert created.id is not None
    fetched = temperatures.get(new_user['id'], created.id)
    assert fetched.value == 21.5
    assert fetched.date == datetime(2024, 1, 1, 12, 0, 0)
    assert fetched.user_id == new_user['id']


def test_get_unknown_id_returns_none(temperatures, new_user):
    assert temperatures.get(new_user['id'], 999) is None


def test_other_user_cannot_see_rows(temperatures, new_user, other_user):
    created = temperatures.create(_temperature(new_user['id'], 19.0))

    assert temperatures.get(other_user['id'], created.id) is None
    assert temperatures.list(other_user['id']) == []
    assert [t.id for t in temperatures.list(new_user['id'])] == [created.id]


def test_list_is_in_insertion_order(temperatures, new_user):
    first = temperatures.create(_temperature(new_user['id'], 18.0, datetime(2024, 1, 2)))
    second = temperatures.create(_temperature(new_user['id'], 17.0, datetime(2024, 1, 1)))

    assert [t.id for t in temperatures.list(new_user['id'])] == [first.id, second.id]


def test_get_latest_uses_most_recent_date(temperatures, new_user, other_user):
    temperatures.create(_temperature(new_user['id'], 18.0, datetime(2024, 1, 2)))
    temperatures.create(_temperature(new_user['id'], 22.0, datetime(2024, 1, 3)))
    temperatures.create(_temperature(new_user['id'], 15.0, datetime(2024, 1, 1)))
    temperatures.create(_temperature(other_user['id'], 30.0, datetime(2024, 2, 1)))

    latest = temperatures.get_latest(new_user['id'])
    assert latest.value == 22.0


def test_get_latest_without_rows(temperatures, new_user):
    assert temperatures.get_latest(new_user['id']) is None


def test_only_temperatures_have_latest():
    assert not hasattr(SwitchRepository(), 'get_latest')
    assert not hasattr(LightRepository(), 'get_latest')


def test_update_changes_value_and_date_only(switches, new_user):
    created = switches.create(Switch(user_id=new_user['id'], value=False, date=datetime(2024, 1, 1)))

    updated = switches.update(new_user['id'], created.id, datetime(2024, 5, 1), True)

    assert updated.id == created.id
    assert updated.user_id == new_user['id']
    assert updated.value is True
    assert updated.date == datetime(2024, 5, 1)


def test_update_of_foreign_row_is_not_found(switches, new_user, other_user):
    created = switches.create(Switch(user_id=new_user['id'], value=False, date=datetime(2024, 1, 1)))

    assert switches.update(other_user['id'], created.id, datetime(2024, 5, 1), True) is None

    db.session.expire_all()
    untouched = switches.get(new_user['id'], created.id)
    assert untouched.value is False
    assert untouched.date == datetime(2024, 1, 1)


def test_update_of_missing_row_is_not_found(switches, new_user):
    assert switches.update(new_user['id'], 42, datetime(2024, 5, 1), True) is None


def test_delete_then_get_is_not_found(temperatures, new_user):
    created = temperatures.create(_temperature(new_user['id'], 20.0))

    temperatures.delete(new_user['id'], created.id)
    assert temperatures.get(new_user['id'], created.id) is None

    # apagar de novo não é erro
    temperatures.delete(new_user['id'], created.id)
    temperatures.delete(new_user['id'], 12345)


def test_delete_of_foreign_row_keeps_it(temperatures, new_user, other_user):
    created = temperatures.create(_temperature(new_user['id'], 20.0))

    temperatures.delete(other_user['id'], created.id)

    assert temperatures.get(new_user['id'], created.id) is not None


def test_database_failure_raises_store_error(temperatures, new_user):
    with patch.object(db.session, 'commit', side_effect=SQLAlchemyError("disk I/O error")):
        with pytest.raises(StoreError) as excinfo:
            temperatures.create(_temperature(new_user['id'], 20.0))

    assert excinfo.value.operation == 'temperatures.create'
    assert temperatures.list(new_user['id']) == []
