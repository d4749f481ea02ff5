"""Tests for record id minting and checking."""

import pytest

from contactbook.utils import uid


class TestNewId:

    def test_new_ids_are_valid(self):
        assert uid.is_valid_id(uid.new_id())

    def test_new_ids_are_unique(self):
        ids = {uid.new_id() for _ in range(100)}
        assert len(ids) == 100

    def test_records_get_ids_from_new_id(self, core):
        """Both users and contacts are keyed by ids in the canonical form."""
        user_id = core.user.create("alice", "hash")
        contact_id = core.contact.create(user_id, "Bob", "bob@example.com", "555-0100")

        assert uid.is_valid_id(user_id)
        assert uid.is_valid_id(contact_id)
        assert core.contact.get_by_id(contact_id)["owner_id"] == user_id


class TestIsValidId:

    def test_accepts_canonical_uuid4(self):
        assert uid.is_valid_id("550e8400-e29b-41d4-a716-446655440000")

    @pytest.mark.parametrize("value", [
        "",
        "123",
        "not-a-uuid",
        # uppercase and unhyphenated spellings never come out of new_id()
        "550E8400-E29B-41D4-A716-446655440000",
        "550e8400e29b41d4a716446655440000",
        # version 1
        "c232ab00-9414-11ec-b3c8-9f6bdeced846",
        "550e8400-e29b-41d4-a716-446655440000/extra",
    ])
    def test_rejects_other_strings(self, value):
        assert not uid.is_valid_id(value)

    def test_rejects_non_strings(self):
        assert not uid.is_valid_id(None)
        assert not uid.is_valid_id(12345)
