"""
Room wizard drafts and save flow
"""
from datetime import datetime, timezone

from schemas import RoomCreate
from services.room_wizard import (
    RoomDraft,
    TenantDraft,
    build_tenant,
    draft_from_room,
    new_room_draft,
    open_slots,
    save_room,
)

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


def filled(name, email=None, **fields):
    return TenantDraft(first_name=name, email=email or f"{name.lower()}@example.com", **fields)


class TestDrafts:
    def test_new_room_draft(self, seeded_store):
        draft = new_room_draft(seeded_store)
        assert draft.room_number == 121
        assert draft.type == "single"
        assert not draft.is_ac
        assert draft.rent == 3000
        assert len(draft.tenants) == 3

    def test_draft_from_room_leaves_tenants_empty(self, seeded_store):
        draft = draft_from_room(seeded_store.get_room("room_1"))
        assert draft.room_number == 101
        assert draft.type == "double"
        assert draft.rent == 6000
        assert not any(t.is_filled for t in draft.tenants)

    def test_is_filled_requires_name_and_email(self):
        assert filled("Asha").is_filled
        assert not TenantDraft(first_name="Asha").is_filled
        assert not TenantDraft(first_name="  ", email="a@example.com").is_filled

    def test_filled_tenants_respects_capacity(self):
        draft = RoomDraft(
            room_number=101,
            type="double",
            tenants=[filled("A"), TenantDraft(), filled("C")],
        )
        assert [t.first_name for t in draft.filled_tenants()] == ["A"]
        assert [t.first_name for t in draft.filled_tenants(open_slots=1)] == ["A"]
        assert draft.filled_tenants(open_slots=0) == []

    def test_open_slots(self, seeded_store):
        room = seeded_store.get_room("room_1")
        assert open_slots(None, "triple") == 3
        assert open_slots(room, "double") == 1
        assert open_slots(room, "single") == 0


class TestBuildTenant:
    def test_documents_default_names(self):
        tenant = build_tenant(filled("Asha", last_name="Iyer"), 105, NOW)
        assert tenant.room_number == 105
        assert tenant.join_date == NOW
        assert [d.type for d in tenant.documents] == ["address_proof", "id_proof"]
        assert [d.name for d in tenant.documents] == ["Address Proof", "ID Proof"]
        assert not any(d.verified for d in tenant.documents)
        assert all(d.id.startswith("doc_") for d in tenant.documents)
        assert not tenant.documents_verified

    def test_uploaded_names_kept(self):
        draft = filled("Asha", address_proof_name="bill.pdf", id_proof_name="aadhaar.png")
        tenant = build_tenant(draft, 105, NOW)
        assert [d.name for d in tenant.documents] == ["bill.pdf", "aadhaar.png"]


class TestSaveRoom:
    def test_new_room_without_tenants_is_vacant(self, empty_store):
        draft = RoomDraft(room_number=101, type="single", rent=3000)
        room = save_room(empty_store, draft)
        assert room.tenants == []
        assert room.is_occupied is False

    def test_new_room_with_tenants(self, empty_store):
        draft = RoomDraft(
            room_number=101,
            type="double",
            is_ac=True,
            rent=10000,
            tenants=[filled("Asha"), filled("Ravi"), filled("Extra")],
        )
        room = save_room(empty_store, draft)

        assert room.is_occupied
        assert [t.first_name for t in room.tenants] == ["Asha", "Ravi"]
        assert len(empty_store.tenants_in_room(101)) == 2
        assert room.is_occupied == bool(room.tenants)

    def test_edit_room_fills_open_slots_only(self, seeded_store):
        existing = seeded_store.get_room("room_1")
        draft = draft_from_room(existing).model_copy(update={
            "rent": 6500,
            "tenants": [filled("Asha"), filled("Ravi"), TenantDraft()],
        })
        room = save_room(seeded_store, draft, existing.id)

        assert room.rent == 6500
        assert room.room_number == 101
        assert [t.first_name for t in room.tenants] == ["Rahul", "Asha"]
        assert room.is_occupied

    def test_edit_vacant_room_without_tenants(self, seeded_store):
        existing = seeded_store.get_room("room_20")
        draft = draft_from_room(existing).model_copy(update={"is_ac": True, "rent": 12000})
        room = save_room(seeded_store, draft, existing.id)
        assert room.is_ac
        assert room.is_occupied is False

    def test_edit_keeps_room_number(self, seeded_store):
        existing = seeded_store.get_room("room_2")
        draft = draft_from_room(existing).model_copy(update={"room_number": 999})
        assert save_room(seeded_store, draft, existing.id).room_number == 102

    def test_unknown_room_id(self, empty_store):
        empty_store.add_room(RoomCreate(room_number=101, rent=3000))
        draft = RoomDraft(room_number=101, rent=3000, tenants=[filled("Asha")])
        assert save_room(empty_store, draft, "room_missing") is None
        assert empty_store.tenants == []
