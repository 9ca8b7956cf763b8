"""Tests for the canonical JSON output layer."""

import json
from pathlib import Path

from sketch_catalog.model import Curation
from sketch_catalog.model.sketch import CurationItem, Dimensions
from sketch_catalog.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_records_serialize_with_upstream_keys():
    item = CurationItem(visual_id="1", user_id="2", curation=Curation.Y2025)
    obj = json.loads(stable_json_dumps([item]))
    assert obj[0]["visualID"] == "1"
    assert obj[0]["userID"] == "2"
    assert obj[0]["curation"] == "2025"


def test_unknown_dimensions_serialize_as_null():
    obj = json.loads(stable_json_dumps(Dimensions()))
    assert obj == {"width": None, "height": None}


def test_nan_is_kept_as_string():
    assert json.loads(stable_json_dumps({"x": float("nan")})) == {"x": "nan"}


def test_paths_are_posix():
    obj = json.loads(stable_json_dumps({"p": Path("images") / "1.png"}))
    assert obj["p"] == "images/1.png"


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
