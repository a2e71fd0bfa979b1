"""Unit tests for the Organization aggregate."""

from uuid import uuid4

import pytest

from tenantry.domain.organization import Organization
from tenantry.domain.shared.exceptions import ValidationError


class TestOrganization:
    def test_create_starts_without_members(self):
        organization = Organization.create("Acme Inc.")

        assert organization.name == "Acme Inc."
        assert organization.user_ids == []

    def test_name_is_trimmed(self):
        assert Organization.create("  Acme  ").name == "Acme"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 256])
    def test_invalid_names_rejected(self, name):
        with pytest.raises(ValidationError):
            Organization.create(name)

    def test_add_member(self):
        organization = Organization.create("Acme")
        user_id = uuid4()

        organization.add_member(user_id)

        assert organization.user_ids == [user_id]
        assert organization.has_member(user_id)

    def test_add_member_twice_keeps_one_entry(self):
        organization = Organization.create("Acme")
        user_id = uuid4()

        organization.add_member(user_id)
        organization.add_member(user_id)

        assert organization.user_ids == [user_id]

    def test_user_ids_are_copied(self):
        organization = Organization.create("Acme")

        organization.user_ids.append(uuid4())

        assert organization.user_ids == []

    def test_rename(self):
        organization = Organization.create("Acme")

        organization.rename("Acme Corp")

        assert organization.name == "Acme Corp"
