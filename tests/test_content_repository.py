"""Tests for the catalog repository"""
from dataclasses import replace

import pytest

from conftest import make_passage
from reading_app.core.models import Difficulty
from reading_app.core.services.content_repository import ContentRepository


def test_get_passage_returns_none_when_missing(repository):
    assert repository.get_passage("nope") is None


def test_get_passage_returns_known_passage(repository):
    passage = repository.get_passage("e2")
    assert passage is not None
    assert passage.title == "Cities and the Night Sky"


def test_browse_returns_everything_by_default(repository):
    page = repository.browse()
    assert [passage.id for passage in page.items] == ["e1", "e2", "e3"]
    assert page.total == 3
    assert page.page == 1


def test_browse_search_is_case_insensitive_over_title_and_content(repository):
    assert [p.id for p in repository.browse("PARADOX").items] == ["e1"]
    assert [p.id for p in repository.browse("milky way").items] == ["e2"]
    assert repository.browse("photosynthesis").items == []


def test_browse_filters_by_difficulty(repository):
    page = repository.browse(difficulty=Difficulty.HARD)
    assert [passage.id for passage in page.items] == ["e3"]


def test_browse_paginates_and_clamps(repository):
    first = repository.browse(page_size=2)
    assert [p.id for p in first.items] == ["e1", "e2"]
    assert first.has_next

    last = repository.browse(page=99, page_size=2)
    assert last.page == 2
    assert [p.id for p in last.items] == ["e3"]

    assert repository.browse(page=0, page_size=2).page == 1


def test_browse_rejects_non_positive_page_size(repository):
    with pytest.raises(ValueError):
        repository.browse(page_size=0)


def test_empty_repository():
    repository = ContentRepository()
    assert not repository.has_passages()
    page = repository.browse()
    assert page.items == []
    assert page.page_count == 1


def test_content_file_is_resolved_once(tmp_path):
    content_path = tmp_path / "passages" / "p1.txt"
    content_path.parent.mkdir()
    content_path.write_text("Loaded from disk.", encoding="utf-8")
    passage = make_passage("p1", content="")
    passage = replace(passage, content_file="passages/p1.txt")
    repository = ContentRepository([passage], data_dir=tmp_path)

    first = repository.get_passage("p1")
    assert first.content == "Loaded from disk."

    content_path.write_text("Changed afterwards.", encoding="utf-8")
    assert repository.get_passage("p1") is first


def test_unreadable_content_file_keeps_catalog_entry(tmp_path):
    passage = make_passage("p1", content="Inline fallback.")
    passage = replace(passage, content_file="passages/missing.txt")
    repository = ContentRepository([passage], data_dir=tmp_path)

    assert repository.get_passage("p1").content == "Inline fallback."


def test_from_directory(tmp_path, catalog_json):
    (tmp_path / "essays.json").write_text(catalog_json, encoding="utf-8")
    (tmp_path / "passages").mkdir()
    (tmp_path / "passages" / "external.txt").write_text("External body.", encoding="utf-8")

    repository = ContentRepository.from_directory(tmp_path)
    assert repository.has_passages()
    assert repository.get_passage("external").content == "External body."


def test_browse_lists_resolved_content_files(tmp_path, catalog_json):
    (tmp_path / "essays.json").write_text(catalog_json, encoding="utf-8")
    (tmp_path / "passages").mkdir()
    (tmp_path / "passages" / "external.txt").write_text(
        "Lighthouses guided ships along the coast.", encoding="utf-8"
    )
    repository = ContentRepository.from_directory(tmp_path)

    listed = {passage.id: passage for passage in repository.browse().items}
    assert listed["external"].content == "Lighthouses guided ships along the coast."
    assert [p.id for p in repository.browse("lighthouses").items] == ["external"]


def test_catalog_preview_uses_content_file_text(tmp_path, catalog_json):
    from reading_app.ui.components.catalog_panel import CatalogPanel

    (tmp_path / "essays.json").write_text(catalog_json, encoding="utf-8")
    (tmp_path / "passages").mkdir()
    (tmp_path / "passages" / "external.txt").write_text("Tides follow the moon.", encoding="utf-8")
    repository = ContentRepository.from_directory(tmp_path)

    passage = repository.browse(difficulty=Difficulty.HARD).items[0]
    assert "Tides follow the moon." in CatalogPanel._describe(1, passage)


def test_bundled_catalog_search_finds_body_words():
    from reading_app.constants.assessment_constants import DEFAULT_DATA_DIR

    repository = ContentRepository.from_directory(DEFAULT_DATA_DIR)
    assert [p.id for p in repository.browse("maximisers").items] == ["e1"]
