from pymarkup import Component, component, h, js
from pymarkup.boot import run_web


@component
def Counter(props, children):
    return h(
        "div",
        {"className": "counter"},
        h("span", {"id": "count"}, props.get("start", 0)),
        h(
            "button",
            {"onClick": js("() => { const c = document.getElementById('count'); c.textContent = +c.textContent + 1; }")},
            "+1",
        ),
    )


class Layout(Component):
    def render(self):
        return h(
            "main",
            {"style": {"max-width": "40rem", "margin": "auto"}},
            h("h1", None, self.props["heading"]),
            self.children,
        )


def home(document):
    document.set_title("pymarkup demo").add_meta({"charset": "utf-8"})
    return h(Layout, {"heading": "Hello"}, Counter(start=3))


def greet(document, name):
    document.set_title(f"Hello {name}")
    return h(Layout, {"heading": f"Hello {name}"}, Counter())


if __name__ == "__main__":
    run_web({"/": home, "/hello/{name}": greet})
