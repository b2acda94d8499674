"""
Unit tests for base_store helpers and typed collection I/O.
"""
import json

import pytest
from pydantic import ValidationError

from schemas import RentRates, Settings, SettingsUpdate, TenantHistory
from services.base_store import BaseStoreService, coerce_payload, merge_fields, new_id


class TestNewId:
    def test_prefix(self):
        assert new_id("room").startswith("room_")

    def test_hex_suffix(self):
        suffix = new_id("tenant").split("_", 1)[1]
        assert len(suffix) == 32
        int(suffix, 16)

    def test_unique(self):
        assert len({new_id("p") for _ in range(100)}) == 100


class TestMergeFields:
    def test_only_explicit_fields_merged(self):
        merged = merge_fields(Settings(), SettingsUpdate(electricity_rate=10))
        assert merged.electricity_rate == 10
        assert merged.total_rooms == 20

    def test_original_record_unchanged(self):
        record = Settings()
        updates = SettingsUpdate.model_validate({"total_rooms": 5})
        assert merge_fields(record, updates).total_rooms == 5
        assert record.total_rooms == 20

    def test_nested_values_not_shared_with_updates(self):
        updates = SettingsUpdate(rent_rates=RentRates())
        merged = merge_fields(Settings(), updates)
        updates.rent_rates.single_ac = 1
        assert merged.rent_rates.single_ac == 4000


class TestCoercePayload:
    def test_dict_validated(self):
        assert coerce_payload({"electricity_rate": 9}, SettingsUpdate).electricity_rate == 9

    def test_model_is_deep_copied(self):
        update = SettingsUpdate(total_rooms=3, rent_rates=RentRates())
        coerced = coerce_payload(update, SettingsUpdate)
        assert coerced == update
        assert coerced is not update
        assert coerced.rent_rates is not update.rent_rates
        assert coerced.model_fields_set == {"total_rooms", "rent_rates"}

    def test_dict_nested_models_copied(self):
        rates = RentRates()
        coerced = coerce_payload({"rent_rates": rates}, SettingsUpdate)
        rates.single_ac = 1
        assert coerced.rent_rates.single_ac == 4000

    def test_invalid_dict_raises(self):
        with pytest.raises(ValidationError):
            coerce_payload({"electricity_rate": -1}, SettingsUpdate)


class TestCollections:
    def test_missing_collection_is_none(self, storage):
        assert BaseStoreService(storage).read_collection("rentease_history", TenantHistory) is None

    def test_record_round_trip(self, storage):
        service = BaseStoreService(storage)
        service.write_record("rentease_settings", Settings(total_rooms=7))
        assert service.read_record("rentease_settings", Settings).total_rooms == 7

    def test_written_json_uses_field_names(self, storage):
        BaseStoreService(storage).write_record("rentease_settings", Settings())
        data = json.loads(storage.get_item("rentease_settings"))
        assert data["rent_rates"]["single_non_ac"] == 3000

    def test_corrupt_collection_raises(self, storage):
        storage.set_item("rentease_history", "not json")
        with pytest.raises(ValidationError):
            BaseStoreService(storage).read_collection("rentease_history", TenantHistory)

    def test_remove_record(self, storage):
        service = BaseStoreService(storage)
        service.write_record("rentease_settings", Settings())
        service.remove_record("rentease_settings")
        assert storage.get_item("rentease_settings") is None
