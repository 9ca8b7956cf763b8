"""Tests for the ``python -m sketch_catalog`` CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from conftest import NEW_ID, OLD_ID, raw_item
from PIL import Image

import sketch_catalog.__main__ as cli
from sketch_catalog.catalog import CatalogAggregator
from sketch_catalog.utils.exit_codes import ExitCode


@pytest.fixture
def run(upstream, monkeypatch, capsys):
    """Run the CLI against the fake upstream; returns (exit_code, parsed_stdout)."""

    def factory(config, *, assets=None):
        return CatalogAggregator(config, client=upstream.client(), assets=assets)

    monkeypatch.setattr(cli, "CatalogAggregator", factory)

    def invoke(*argv: str):
        code = cli.main(list(argv))
        out = capsys.readouterr().out
        return code, (json.loads(out) if out else None)

    return invoke


class TestCli:
    def test_curation(self, upstream, run):
        upstream.curations[NEW_ID] = [raw_item(2690038)]
        upstream.curations[OLD_ID] = [raw_item(5)]
        code, data = run("curation", "--limit", "3")
        assert code == ExitCode.SUCCESS
        assert [d["visualID"] for d in data] == ["2690038", "5"]
        assert [d["curation"] for d in data] == ["2025", "2024"]
        assert all(r.url.params["limit"] == "3" for r in upstream.requests)

    def test_sketch(self, upstream, run):
        upstream.curations[OLD_ID] = [raw_item(5, title="Waves")]
        code, data = run("sketch", "5")
        assert code == ExitCode.SUCCESS
        assert data["title"] == "Waves"
        assert data["license"] == ""

    def test_size(self, upstream, run):
        upstream.curations[OLD_ID] = [raw_item(5)]
        upstream.code["5"] = [{"code": "createCanvas(720, 720, WEBGL)"}]
        code, data = run("size", "5")
        assert code == ExitCode.SUCCESS
        assert data == {"width": 720.0, "height": 720.0}

    def test_urls(self, run):
        code, data = run("urls", "9")
        assert code == ExitCode.SUCCESS
        assert data["link"] == "https://openprocessing.org/sketch/9"
        assert data["embed"].startswith("https://openprocessing.org/sketch/9/embed/")
        assert data["thumbnail"].endswith("visualThumbnail9@2x.jpg")

    def test_random(self, upstream, run):
        upstream.curations[OLD_ID] = [raw_item(i) for i in range(1, 6)]
        code, data = run("random", "--num", "2")
        assert code == ExitCode.SUCCESS
        assert len(data) == 2
        assert len({d["visualID"] for d in data}) == 2

    def test_thumbnail_remote(self, run):
        code, data = run("thumbnail", "9")
        assert code == ExitCode.SUCCESS
        assert data["kind"] == "remote"

    def test_thumbnail_local(self, run, tmp_path: Path):
        Image.new("RGB", (400, 400)).save(tmp_path / "9.png", "PNG")
        code, data = run("thumbnail", "9", "--images", str(tmp_path))
        assert code == ExitCode.SUCCESS
        assert data["kind"] == "local"
        assert (data["width"], data["height"], data["format"]) == (400, 400, "png")

    def test_thumbnail_bad_images_dir(self, run, tmp_path: Path, capsys):
        code, data = run("thumbnail", "9", "--images", str(tmp_path / "missing"))
        assert code == ExitCode.ERROR
        assert data is None

    @pytest.mark.parametrize("argv", [["curation", "--limit", "0"], ["random", "--num", "x"], []])
    def test_usage_errors_exit_2(self, run, argv):
        with pytest.raises(SystemExit) as exc:
            run(*argv)
        assert exc.value.code == ExitCode.ERROR
