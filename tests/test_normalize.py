"""Tests for curation payload normalization."""

from __future__ import annotations

import pytest

from sketch_catalog.model.sketch import CurationItem
from sketch_catalog.normalize import normalize_curation_items


class TestNormalizeCurationItems:
    @pytest.mark.parametrize("payload", [None, {}, {"error": "rate limited"}, "oops", 42])
    def test_non_list_yields_empty(self, payload):
        assert normalize_curation_items(payload) == []

    def test_numeric_ids_become_strings(self):
        items = normalize_curation_items([{"visualID": 2690038, "userID": 77}])
        assert items[0].visual_id == "2690038"
        assert items[0].user_id == "77"

    def test_string_ids_pass_through(self):
        items = normalize_curation_items([{"visualID": "12", "userID": "34"}])
        assert (items[0].visual_id, items[0].user_id) == ("12", "34")

    @pytest.mark.parametrize("raw", [{"visualID": 1}, {"visualID": 1, "userID": None}])
    def test_missing_user_id_becomes_empty_string(self, raw):
        assert normalize_curation_items([raw])[0].user_id == ""

    def test_missing_fields_stay_none(self):
        item = normalize_curation_items([{"visualID": 1}])[0]
        assert item.title is None
        assert item.mode is None
        assert item.curation is None

    def test_missing_visual_id_becomes_empty_string(self):
        items = normalize_curation_items([{"title": "x"}, {"visualID": None}])
        assert [i.visual_id for i in items] == ["", ""]

    def test_malformed_elements_do_not_raise(self):
        items = normalize_curation_items([None, "x", {"visualID": 5}])
        assert len(items) == 3
        assert all(isinstance(i, CurationItem) for i in items)
        assert items[2].visual_id == "5"

    def test_unknown_keys_are_preserved(self):
        item = normalize_curation_items([{"visualID": 1, "thumbnailID": 9}])[0]
        assert item.to_dict()["thumbnailID"] == 9

    def test_upstream_curation_key_is_ignored(self):
        item = normalize_curation_items([{"visualID": 1, "curation": "1999"}])[0]
        assert item.curation is None
        assert "curation" not in item.to_dict()
