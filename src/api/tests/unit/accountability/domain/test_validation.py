"""Unit tests for domain validation predicates."""

import pytest

from accountability.domain.aggregates import Group, Member
from accountability.domain.validation import (
    belongs_to_group,
    is_unique_email,
    is_unique_group_name,
    is_valid_group_name,
)
from accountability.domain.value_objects import GroupId


class TestIsValidGroupName:
    @pytest.mark.parametrize("name", ["Alpha", " Alpha ", "a"])
    def test_accepts_non_blank(self, name):
        assert is_valid_group_name(name)

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_rejects_blank(self, name):
        assert not is_valid_group_name(name)


class TestIsUniqueGroupName:
    def test_exact_match_is_duplicate(self):
        groups = [Group.create(name="Alpha")]
        assert not is_unique_group_name("Alpha", groups)

    def test_comparison_is_case_sensitive(self):
        groups = [Group.create(name="Alpha")]
        assert is_unique_group_name("alpha", groups)


class TestIsUniqueEmail:
    def test_detects_duplicate_in_any_group(self):
        members = [
            Member.create(group_id=GroupId.generate(), name="Ann", email="ann@x.com")
        ]
        assert not is_unique_email("ann@x.com", members)

    def test_empty_collection_is_unique(self):
        assert is_unique_email("ann@x.com", [])


class TestBelongsToGroup:
    def test_member_of_group(self):
        group_id = GroupId.generate()
        member = Member.create(group_id=group_id, name="Ann", email="a@x")
        assert belongs_to_group(member, group_id)

    def test_member_of_other_group(self):
        member = Member.create(group_id=GroupId.generate(), name="Ann", email="a@x")
        assert not belongs_to_group(member, GroupId.generate())

    def test_missing_member(self):
        assert not belongs_to_group(None, GroupId.generate())
