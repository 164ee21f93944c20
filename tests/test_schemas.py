import pytest
from pydantic import ValidationError

from shop_api.db.schemas.product import ProductCreate, ProductUpdate
from shop_api.db.schemas.store import StoreRead, StoreUpdate
from shop_api.db.schemas.user import UserUpdate
from shop_api.errors import format_validation_errors


def test_patch_tracks_only_sent_fields():
    assert UserUpdate.model_validate({"name": "A"}).changes() == {"name": "A"}
    assert UserUpdate.model_validate({}).changes() == {}


def test_patch_maps_wire_names_to_columns():
    patch = ProductUpdate.model_validate({"storeId": "3", "price": "2"})
    assert patch.changes() == {"store_id": 3, "price": 2.0}


def test_patch_rejects_null_values():
    with pytest.raises(ValidationError) as excinfo:
        StoreUpdate.model_validate({"userId": None, "name": None})
    assert "name, user_id may not be null" in str(excinfo.value)


def test_create_requires_all_fields():
    with pytest.raises(ValidationError):
        ProductCreate.model_validate({"name": "P", "price": 1})


def test_read_model_serializes_camel_case():
    store = StoreRead(id=1, name="S", user_id=2)
    assert store.model_dump(by_alias=True) == {"id": 1, "name": "S", "userId": 2}


def test_format_validation_errors():
    errors = [
        {"loc": ("body", "price"), "msg": "Input should be a valid number"},
        {"loc": ("path", "user_id"), "msg": "Input should be a valid integer"},
        {"loc": ("body",), "msg": "Value error, name may not be null"},
    ]
    assert format_validation_errors(errors) == (
        "price: Input should be a valid number; "
        "user_id: Input should be a valid integer; "
        "Value error, name may not be null"
    )


def test_foreign_ids_are_bounded_to_column_range():
    with pytest.raises(ValidationError):
        StoreUpdate.model_validate({"userId": 2**63})
    assert ProductUpdate.model_validate({"storeId": 2**63 - 1}).changes() == {"store_id": 2**63 - 1}
