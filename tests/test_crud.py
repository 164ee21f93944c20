"""CRUD functions against a session, without the HTTP layer."""
import pytest

from shop_api.db.crud import product as product_crud
from shop_api.db.crud import store as store_crud
from shop_api.db.crud import user as user_crud
from shop_api.db.schemas.product import ProductCreate
from shop_api.db.schemas.store import StoreCreate, StoreUpdate
from shop_api.db.schemas.user import UserCreate, UserUpdate
from shop_api.errors import ConstraintViolationError, PersistenceError, RecordNotFoundError


@pytest.fixture
def owner(session):
    return user_crud.create_user(session, UserCreate(name="Owner", email="owner@x.com"))


def test_duplicate_email_raises_constraint_violation(session, owner):
    with pytest.raises(ConstraintViolationError) as excinfo:
        user_crud.create_user(session, UserCreate(name="Copy", email="owner@x.com"))
    assert excinfo.value.status_code == 400
    assert excinfo.value.kind == "constraint_violation"
    # session is usable again after the rollback
    assert [u.email for u in user_crud.get_users(session)] == ["owner@x.com"]


def test_update_applies_only_sent_fields(session, owner):
    updated = user_crud.update_user(session, owner.id, UserUpdate(email="new@x.com"))
    assert updated.email == "new@x.com"
    assert updated.name == "Owner"


def test_update_missing_record(session):
    with pytest.raises(RecordNotFoundError):
        user_crud.update_user(session, 99, UserUpdate(name="Nobody"))


def test_delete_missing_record(session):
    with pytest.raises(RecordNotFoundError) as excinfo:
        store_crud.delete_store(session, 5)
    assert str(excinfo.value) == "Store 5 does not exist"


def test_store_for_unknown_user_violates_foreign_key(session):
    with pytest.raises(ConstraintViolationError):
        store_crud.create_store(session, StoreCreate(name="Orphan", user_id=123))


def test_store_update_accepts_camel_case(session, owner):
    store = store_crud.create_store(session, StoreCreate(name="S", userId=owner.id))
    other = user_crud.create_user(session, UserCreate(name="Other", email="other@x.com"))
    moved = store_crud.update_store(session, store.id, StoreUpdate.model_validate({"userId": other.id}))
    assert moved.user_id == other.id
    assert moved.name == "S"


def test_product_read_loads_store_and_owner(session, owner):
    store = store_crud.create_store(session, StoreCreate(name="S", user_id=owner.id))
    product = product_crud.create_product(session, ProductCreate(name="P", price=1.5, store_id=store.id))
    session.expunge_all()

    loaded = product_crud.get_product(session, product.id)
    session.close()
    # relations were loaded eagerly, so they survive the closed session
    assert loaded.store.name == "S"
    assert loaded.store.user.email == "owner@x.com"


def test_deleting_user_with_store_leaves_both(session, owner):
    store = store_crud.create_store(session, StoreCreate(name="S", user_id=owner.id))
    with pytest.raises(ConstraintViolationError):
        user_crud.delete_user(session, owner.id)
    assert store_crud.get_store(session, store.id).user_id == owner.id


def test_driver_overflow_becomes_persistence_error(session):
    with pytest.raises(PersistenceError) as excinfo:
        user_crud.get_user(session, 2**70)
    assert excinfo.value.status_code == 400
    # session still usable after the rollback
    assert user_crud.get_users(session) == []
