"""Behaviour tests for exporting a linked Markdown site.

These pytest-bdd scenarios drive ``features/site_export.feature``. Each
scenario writes a small source tree under ``tmp_path``, exports it with
:func:`chanzero.generator.export_site`, and inspects the written HTML.

Usage
-----
Run ``pytest tests/bdd/test_site_export_bdd.py -v`` after installing the test
extra (``pip install -e .[test]``).
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from chanzero.generator import export_site

if typ.TYPE_CHECKING:
    from chanzero.generator import ExportReport

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_export.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "site" / "src"
    src.mkdir(parents=True)
    return src


@given("a site whose root links to a page that links back to the root")
def given_cyclic_site(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    src = _source_dir(tmp_path)
    (src / "index.md").write_text(
        "Title: Loop\nSiteCss: loop.css\n///\n[Next](next.md)\n", encoding="utf-8"
    )
    (src / "next.md").write_text("[Back](index.html)\n", encoding="utf-8")
    scenario_state["root"] = src / "index.md"
    scenario_state["site"] = tmp_path / "site"


@given("a site whose root links to an unreadable page and a valid page")
def given_site_with_broken_page(
    tmp_path: Path, scenario_state: dict[str, object]
) -> None:
    src = _source_dir(tmp_path)
    (src / "index.md").write_text("[Bad](bad.md)\n\n[Good](good.md)\n", encoding="utf-8")
    (src / "bad.md").write_bytes(b"\xc3\x28 not utf-8")
    (src / "good.md").write_text("# Good\n", encoding="utf-8")
    scenario_state["root"] = src / "index.md"
    scenario_state["site"] = tmp_path / "site"


@when("I export the site")
def when_export(scenario_state: dict[str, object]) -> None:
    root = typ.cast("Path", scenario_state["root"])
    scenario_state["report"] = export_site(root)


@then("every page is written exactly once")
def then_written_once(scenario_state: dict[str, object]) -> None:
    report = typ.cast("ExportReport", scenario_state["report"])
    destinations = [page.destination.name for page in report.exported]
    assert destinations == ["index.html", "next.html"]
    assert report.ok


@then("the root page is a standalone document")
def then_root_is_standalone(scenario_state: dict[str, object]) -> None:
    site = typ.cast("Path", scenario_state["site"])
    soup = BeautifulSoup((site / "index.html").read_text("utf-8"), "html.parser")
    assert soup.title.get_text() == "Loop"
    assert soup.find("link", rel="stylesheet")["href"] == "loop.css"
    assert "<html" not in (site / "next.html").read_text("utf-8")


@then("the valid page is written")
def then_valid_page_written(scenario_state: dict[str, object]) -> None:
    site = typ.cast("Path", scenario_state["site"])
    soup = BeautifulSoup((site / "good.html").read_text("utf-8"), "html.parser")
    assert soup.find("h1").get_text() == "Good"


@then("the unreadable page is reported as failed")
def then_unreadable_reported(scenario_state: dict[str, object]) -> None:
    report = typ.cast("ExportReport", scenario_state["report"])
    site = typ.cast("Path", scenario_state["site"])
    assert [failure.source.name for failure in report.failures] == ["bad.md"]
    assert not (site / "bad.html").exists()
