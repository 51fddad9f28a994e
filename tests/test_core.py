import pytest

from pymarkup.core import (
    FRAGMENT,
    UNDEFINED,
    Boolean,
    Component,
    ComponentKind,
    ComponentRef,
    Element,
    Fragment,
    NodeList,
    Null,
    Number,
    Text,
    UnsupportedNodeError,
    component,
    h,
    to_node,
)


def test_to_node_scalars():
    assert to_node("hi") == Text("hi")
    assert to_node(3) == Number(3)
    assert to_node(2.5) == Number(2.5)
    # bool must not become a Number
    assert to_node(True) == Boolean(True)
    assert to_node(None) == Null()
    assert to_node(UNDEFINED) == Null(undefined=True)


def test_to_node_sequences_are_adapted_recursively():
    node = to_node(["a", 1, [False]])
    assert node == NodeList((Text("a"), Number(1), NodeList((Boolean(False),))))
    assert to_node(x for x in "ab") == NodeList((Text("a"), Text("b")))


def test_to_node_keeps_nodes():
    el = Element("p")
    assert to_node(el) is el


def test_to_node_rejects_unknown_shapes():
    with pytest.raises(UnsupportedNodeError) as exc:
        to_node(object())
    # still a TypeError for callers that catch the builtin
    assert isinstance(exc.value, TypeError)


def test_h_builds_elements():
    node = h("div", {"id": "x"}, "a", "b")
    assert node == Element("div", {"id": "x"}, NodeList((Text("a"), Text("b"))))
    assert h("br") == Element("br", {}, NodeList())
    assert h("p", None, "one").children == Text("one")


def test_h_children_prop_stays_on_elements():
    node = h("button", {"children": "Click me"})
    assert node.attributes == {"children": "Click me"}


def test_h_positional_children_win_over_prop():
    node = h("p", {"children": "ignored"}, "kept")
    assert node.attributes == {}
    assert node.children == Text("kept")


def test_h_fragment():
    assert h(FRAGMENT, None, "x") == Fragment(Text("x"))


def test_h_components():
    def Card(props, children):
        return None

    class Panel(Component):
        def render(self):
            return None

    ref = h(Card, {"title": "t", "children": "body"})
    assert ref == ComponentRef(ComponentKind.FUNCTION, Card, {"title": "t"}, Text("body"))
    assert h(Panel).kind is ComponentKind.CLASS


def test_component_decorator_returns_refs():
    @component
    def Card(props, children):
        return h("div", props, children)

    ref = Card("body", title="t")
    assert isinstance(ref, ComponentRef)
    assert ref.callable is Card.__wrapped__
    assert ref.props == {"title": "t"}
    assert ref.children == Text("body")
    assert ref.name == "Card"

    # h() unwraps the decorated factory
    assert h(Card, {"title": "t"}).callable is Card.__wrapped__


def test_component_children_keyword_becomes_children():
    @component
    def Card(props, children):
        return h("div", None, children)

    ref = Card(children="x", title="t")
    assert ref.props == {"title": "t"}
    assert ref.children == Text("x")

    # positional children still win
    assert Card("kept", children="dropped").children == Text("kept")
    assert Card().children == NodeList()
