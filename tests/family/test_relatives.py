"""Tests for getRelatives results."""

import pytest

from wikitree_api.exceptions import MalformedValueError, MissingValueError
from wikitree_api.family.relatives import Relatives
from wikitree_api.models import RelativesRequest, RequestType


@pytest.fixture
def relatives_result(make_person):
    """Relatives of Churchill-4 (asked for by id) and Hozier-1 (asked for by name)."""
    return {
        "items": [
            {
                "key": "Hozier-1",
                "user_id": 1003,
                "user_name": "Hozier-1",
                "person": make_person(1003, "Hozier-1", "Female", Spouses={
                    "5589": make_person(5589, "Churchill-4", "Male"),
                }),
            },
            {
                "key": "5589",
                "user_id": 5589,
                "user_name": "Churchill-4",
                "person": make_person(5589, "Churchill-4", "Male", Parents=[
                    make_person(1001, "Churchill-25", "Male"),
                    make_person(1002, "Jerome-1", "Female"),
                ]),
            },
        ],
        "status": 0,
    }


class TestRelatives:
    """Indexes over the base people."""

    def test_indexes(self, relatives_result):
        request = RelativesRequest(keys="5589,Hozier-1", get_parents=True, get_spouses=True)
        relatives = Relatives(request, relatives_result)
        assert list(relatives.by_key) == ["5589", "Hozier-1"]
        assert list(relatives.by_wikitree_id) == ["Churchill-4", "Hozier-1"]
        assert list(relatives.by_person_id) == [1003, 5589]

    def test_request_types_follow_keys(self, relatives_result):
        relatives = Relatives(RelativesRequest(keys="5589,Hozier-1"), relatives_result)
        assert relatives.by_key["5589"].request_type == RequestType.PERSON_ID
        assert relatives.by_key["Hozier-1"].request_type == RequestType.WIKITREE_ID

    def test_relatives_hang_off_base_people(self, relatives_result):
        relatives = Relatives(RelativesRequest(keys="5589,Hozier-1"), relatives_result)
        churchill = relatives.by_person_id[5589]
        assert churchill.biological_father.wikitree_id == "Churchill-25"
        assert churchill.biological_mother.wikitree_id == "Jerome-1"
        assert [s.wikitree_id for s in relatives.by_wikitree_id["Hozier-1"].spouses] == ["Churchill-4"]

    def test_find(self, relatives_result):
        relatives = Relatives(RelativesRequest(keys="5589,Hozier-1"), relatives_result)
        assert relatives.find(5589).wikitree_id == "Churchill-4"
        assert relatives.find("Churchill-4").person_id == 5589
        assert relatives.find("5589").person_id == 5589
        assert relatives.find("Nobody-1") is None

    def test_indexes_are_copies(self, relatives_result):
        relatives = Relatives(RelativesRequest(keys="5589,Hozier-1"), relatives_result)
        relatives.by_key.clear()
        assert len(relatives.by_key) == 2

    def test_same_person_twice(self, relatives_result):
        items = relatives_result["items"]
        items.append(dict(items[1], key="Churchill-4"))
        relatives = Relatives(RelativesRequest(keys="5589,Hozier-1,Churchill-4"), relatives_result)
        assert len(relatives.by_key) == 3
        assert len(relatives.by_person_id) == 2

    def test_no_items(self):
        relatives = Relatives(RelativesRequest(keys="Nobody-1"), {"status": 0})
        assert relatives.by_key == {}

    def test_non_record_item(self):
        with pytest.raises(MalformedValueError):
            Relatives(RelativesRequest(keys="5589"), {"items": ["5589"]})

    def test_item_without_key(self, make_person):
        with pytest.raises(MissingValueError):
            Relatives(RelativesRequest(keys="5589"), {"items": [{"person": make_person(5589, "Churchill-4")}]})

    def test_request_flags_and_repr(self, relatives_result):
        request = RelativesRequest(keys="5589,Hozier-1", get_children=True)
        relatives = Relatives(request, relatives_result)
        assert relatives.request_children
        assert not relatives.request_parents
        assert repr(relatives) == (
            "Relatives(keys='5589,Hozier-1', parents=False, children=True, "
            "spouses=False, siblings=False)"
        )
