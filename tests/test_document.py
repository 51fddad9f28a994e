import asyncio

import pytest

from pymarkup.config import Settings
from pymarkup.core import component, h
from pymarkup.web import Document, js
from pymarkup.web.listeners import render_listener_script


def render(doc, node):
    return asyncio.run(doc.render_to_dynamic_markup(node))


def test_defaults_come_from_settings():
    html = render(Document(), h("p", None, "hi"))
    assert html.startswith("<!DOCTYPE html>\n<html lang='en'>")
    assert "<title>Rendered as dynamic markup</title>" in html
    assert "<noscript>Your browser does not support JavaScript!</noscript>" in html

    custom = Settings(lang="de", title="Start", no_script="JS bitte")
    html = render(Document(settings=custom), h("p"))
    assert "<html lang='de'>" in html
    assert "<title>Start</title>" in html
    assert "<noscript>JS bitte</noscript>" in html


def test_fragments_are_placed_in_order():
    doc = (
        Document()
        .set_lang("fr")
        .set_title("Accueil")
        .add_meta({"charset": "utf-8"})
        .add_link({"href": "main.css", "rel": "stylesheet"})
        .add_style({}, "p {color: #26b72b;}")
        .add_header_script({"src": "js/vendor/jquery.js", "async": True})
        .add_body_script({}, "console.log(1)", False)
        .set_no_script("Unable to run scripts !")
    )
    html = render(doc, h("button", {"onClick": js("() => go()")}, "Go"))

    parts = [
        "<html lang='fr'>",
        "<title>Accueil</title>",
        '<meta charset="utf-8"></meta>',
        '<link href="main.css" rel="stylesheet"></link>',
        "<style>p {color: #26b72b;}</style>",
        '<script src="js/vendor/jquery.js" async></script>',
        "</head>",
        '<button data-identifier="button_0" data-listeners="click">Go</button>',
        "<script>console.log(1)</script>",
        "button_0.addEventListener(\"click\", () => go());",
        "<noscript>Unable to run scripts !</noscript>",
    ]
    positions = [html.index(p) for p in parts]
    assert positions == sorted(positions)


def test_listener_script_is_emitted_without_handlers():
    html = render(Document(), h("p", None, "static"))
    assert render_listener_script([]) in html


def test_script_content_waits_for_dom_by_default():
    doc = Document().add_header_script({}, "init();")
    html = render(doc, h("p"))
    assert (
        '<script>document.addEventListener("DOMContentLoaded", () => {\ninit();\n});\n</script>'
        in html
    )


def test_function_script_content_is_the_listener():
    doc = (
        Document()
        .add_body_script({}, js('() => alert("Hello World!")'))
        .add_body_script({"type": "module"}, js("function main() {}"), False)
    )
    html = render(doc, h("p"))
    assert '<script>document.addEventListener("DOMContentLoaded", () => alert("Hello World!"));</script>' in html
    assert '<script type="module">function main() {}</script>' in html


def test_handlers_on_metadata_tags_are_dropped():
    with pytest.warns(RuntimeWarning):
        doc = Document().add_meta({"name": "x", "onLoad": js("f")})
    html = render(doc, h("p"))
    assert '<meta name="x"></meta>' in html


def test_create_component_callback_delegates_to_renderer():
    doc = Document()

    @component
    def Title(props, doc, children):
        doc.set_title(props["text"])
        return h("h1", None, props["text"])

    @component
    def Page(props, children):
        return h("main", None, Title(text="Docs"))

    doc.set_create_component_callback(lambda fn, props, children: fn(props, doc, children))
    html = render(doc, Page())
    assert "<main><h1>Docs</h1></main>" in html
    assert "<title>Docs</title>" in html


def test_each_render_starts_fresh_identifiers():
    doc = Document()
    tree = h("button", {"onClick": js("f")})
    first = render(doc, tree)
    second = render(doc, tree)
    assert first == second
    assert "button_1" not in second
