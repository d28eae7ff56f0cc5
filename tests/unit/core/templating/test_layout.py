from __future__ import annotations

"""
Unit tests for the Layout Applier.

Verifies placeholder injection, passthrough of layout-less pages,
component resolution inside layouts and the no-chaining rule.
"""

from pathlib import Path
from typing import Callable, Dict

from elbuilder.core.templating.context import ResolutionContext
from elbuilder.core.templating.layout import LayoutApplier
from elbuilder.core.templating.resolver import ComponentResolver


def _applier(base: Path) -> LayoutApplier:
    context = ResolutionContext(src_dir=str(base / "src"), dest_dir=str(base / "build"))
    return LayoutApplier(ComponentResolver(context))


def _render(base: Path, page: str = "index.html") -> str:
    applier = _applier(base)
    return applier.apply_layout(applier.resolver.resolve(page, set()))


def test_layout_wraps_page_body(make_site: Callable[[Dict], Path]) -> None:
    """Concrete scenario: base layout with the page body injected."""
    base = make_site({
        "el-layouts/base.html": "<h1>Site</h1><el-content/>",
        "index.html": '<el-layout name="base">Body text</el-layout>',
    })

    assert _render(base) == "<h1>Site</h1>Body text"


def test_page_without_layout_is_unchanged() -> None:
    applier = LayoutApplier(ComponentResolver(ResolutionContext("/nonexistent/src", "/nonexistent/build")))

    assert applier.apply_layout("<p>Just a page</p>") == "<p>Just a page</p>"


def test_text_outside_layout_reference_is_not_emitted(make_site: Callable[[Dict], Path]) -> None:
    base = make_site({
        "el-layouts/base.html": "[<el-content/>]",
        "index.html": 'before<el-layout name="base.html">inside</el-layout>after',
    })

    assert _render(base) == "[inside]"


def test_body_is_component_expanded(make_site: Callable[[Dict], Path]) -> None:
    base = make_site({
        "el-components/greeting.html": "Hello",
        "el-layouts/base.html": "<body><el-content/></body>",
        "index.html": '<el-layout name="base"><el-component src="greeting"></el-component>!</el-layout>',
    })

    assert _render(base) == "<body>Hello!</body>"


def test_layout_components_are_resolved(make_site: Callable[[Dict], Path]) -> None:
    """A layout and its page may use the same component independently."""
    base = make_site({
        "el-components/nav.html": "<nav/>",
        "el-layouts/base.html": '<el-component src="nav"></el-component><el-content/>',
        "index.html": '<el-layout name="base"><el-component src="nav"></el-component>main</el-layout>',
    })

    assert _render(base) == "<nav/><nav/>main"


def test_layout_without_placeholder_drops_body(make_site: Callable[[Dict], Path]) -> None:
    base = make_site({
        "el-layouts/static.html": "<h1>Maintenance</h1>",
        "index.html": '<el-layout name="static">ignored</el-layout>',
    })

    assert _render(base) == "<h1>Maintenance</h1>"


def test_only_first_layout_reference_is_used(make_site: Callable[[Dict], Path]) -> None:
    base = make_site({
        "el-layouts/one.html": "1:<el-content/>",
        "el-layouts/two.html": "2:<el-content/>",
        "index.html": '<el-layout name="one">A</el-layout><el-layout name="two">B</el-layout>',
    })

    assert _render(base) == "1:A"


def test_layouts_do_not_chain(make_site: Callable[[Dict], Path]) -> None:
    """Layout syntax inside a layout file is emitted literally."""
    inner = '<el-layout name="outer"><el-content/></el-layout>'
    base = make_site({
        "el-layouts/outer.html": "OUTER<el-content/>",
        "el-layouts/inner.html": inner,
        "index.html": '<el-layout name="inner">X</el-layout>',
    })

    assert _render(base) == '<el-layout name="outer">X</el-layout>'


def test_missing_layout_yields_empty_output(make_site: Callable[[Dict], Path]) -> None:
    base = make_site({"index.html": '<el-layout name="nope">Body</el-layout>'})
    applier = _applier(base)

    result = applier.apply_layout(applier.resolver.resolve("index.html", set()))

    assert result == ""
    diag = applier.resolver.context.diagnostics
    assert [(d.kind, d.rel_path) for d in diag] == [("read", "el-layouts/nope.html")]
