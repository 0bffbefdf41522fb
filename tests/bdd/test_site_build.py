"""Behaviour tests for building sites with pagination and layout loops.

These pytest-bdd scenarios run ``SiteBuilder`` end-to-end against small sites
written to a temporary directory. They prove that paginated pages fan out into
one file per window and that a page stuck in a layout loop is reported while
the other pages still build.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v`` after installing the dev
dependencies (``uv sync --group dev``). No network access is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from pagesmith.builder import BuildReport, SiteBuilder
from pagesmith.config import SiteConfig
from pagesmith.errors import RenderingLoopDetected

FEATURES = Path(__file__).resolve().parents[2] / "features"
scenarios(FEATURES / "paginated_build.feature")
scenarios(FEATURES / "layout_loops.feature")

ScenarioState = dict[str, typ.Any]

BLOG_INDEX = """---
title: Blog
---
{% set pager = paginate(site.posts, PER_PAGE) %}
<ul>
{% for post in pager %}
<li>{{ post }}</li>
{% endfor %}
</ul>
{% if pager.has_previous %}
<a rel="prev" href="{{ pager.previous.url }}">newer</a>
{% endif %}
"""

LAYOUT = """<html><body>
<h1>{{ page.meta.title }}</h1>
{{ content }}
</body></html>
"""


@pytest.fixture
def scenario_state(tmp_path: Path) -> ScenarioState:
    """Return a mutable dict seeded with a config rooted in ``tmp_path``."""
    config = SiteConfig(
        content_dir=tmp_path / "content",
        layouts_dir=tmp_path / "layouts",
        output_dir=tmp_path / "output",
    )
    return {"config": config}


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@given(
    parsers.parse(
        "a site whose blog index paginates {count:d} posts {per_page:d} per page"
    )
)
def given_paginated_site(
    scenario_state: ScenarioState, count: int, per_page: int
) -> None:
    """Write a blog index that paginates ``count`` posts."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    config.variables["posts"] = [f"post {n}" for n in range(1, count + 1)]
    _write(
        config.content_dir / "blog" / "index.html",
        BLOG_INDEX.replace("PER_PAGE", str(per_page)),
    )
    _write(config.layouts_dir / "default.html", LAYOUT)


@given(parsers.parse('a site whose "{name}" page uses layouts that wrap each other'))
def given_layout_loop(scenario_state: ScenarioState, name: str) -> None:
    config = typ.cast("SiteConfig", scenario_state["config"])
    _write(config.content_dir / f"{name}.html", "---\nlayout: first\n---\nbody")
    _write(config.layouts_dir / "first.html", "---\nlayout: second\n---\n{{ content }}")
    _write(config.layouts_dir / "second.html", "---\nlayout: first\n---\n{{ content }}")


@given(parsers.parse('a healthy "{name}" page'))
def given_healthy_page(scenario_state: ScenarioState, name: str) -> None:
    config = typ.cast("SiteConfig", scenario_state["config"])
    _write(
        config.content_dir / f"{name}.html",
        "---\ntitle: About\n---\n<p>About us</p>",
    )
    _write(config.layouts_dir / "default.html", LAYOUT)


@when("I build the site")
def when_build(scenario_state: ScenarioState) -> None:
    config = typ.cast("SiteConfig", scenario_state["config"])
    scenario_state["report"] = SiteBuilder(config).run()


@then(parsers.parse("{count:d} files are written for the blog index"))
def then_files_written(scenario_state: ScenarioState, count: int) -> None:
    report = typ.cast("BuildReport", scenario_state["report"])
    config = typ.cast("SiteConfig", scenario_state["config"])
    blog = config.output_dir / "blog"
    expected = [blog / "index.html"] + [
        blog / str(number) / "index.html" for number in range(2, count + 1)
    ]
    assert report.written == expected
    assert report.ok
    assert not (blog / str(count + 1) / "index.html").exists()


@then(parsers.parse('the last window lists only "{item}"'))
def then_last_window(scenario_state: ScenarioState, item: str) -> None:
    report = typ.cast("BuildReport", scenario_state["report"])
    soup = BeautifulSoup(report.written[-1].read_text(encoding="utf-8"), "html.parser")
    assert [li.get_text() for li in soup.find_all("li")] == [item]
    assert soup.h1 is not None
    assert soup.h1.get_text() == "Blog"


@then("every window links to the one before it")
def then_previous_links(scenario_state: ScenarioState) -> None:
    report = typ.cast("BuildReport", scenario_state["report"])
    first, *rest = report.written
    first_soup = BeautifulSoup(first.read_text(encoding="utf-8"), "html.parser")
    assert first_soup.find("a", rel="prev") is None
    for number, path in enumerate(rest, start=2):
        soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
        link = soup.find("a", rel="prev")
        assert link is not None, f"Expected a previous link in window {number}"
        if number == 2:
            assert link["href"] == "/blog/index.html"
        else:
            assert link["href"] == f"/blog/{number - 1}/index.html"


@then(parsers.parse('the "{name}" page is reported as a rendering loop'))
def then_loop_reported(scenario_state: ScenarioState, name: str) -> None:
    report = typ.cast("BuildReport", scenario_state["report"])
    failures = [r for r in report.failures if r.page.filename == name]
    assert len(failures) == 1
    assert isinstance(failures[0].errors[0], RenderingLoopDetected)


@then(parsers.parse('the "{name}" page is rendered in full'))
def then_rendered(scenario_state: ScenarioState, name: str) -> None:
    config = typ.cast("SiteConfig", scenario_state["config"])
    html = (config.output_dir / f"{name}.html").read_text(encoding="utf-8")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.h1 is not None
    assert soup.h1.get_text() == "About"
    assert soup.p is not None
    assert soup.p.get_text() == "About us"
