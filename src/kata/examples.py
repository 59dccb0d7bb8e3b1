"""
Example selectors from the builder documentation.

Each builder returns the Fragment; EXPECTED maps builder names to the
string the fragment should stringify to. Used by the demo script and tests.
"""
from kata.selectors import Fragment, SelectorBuilder, css_selector_builder


def build_image_link_selector(builder: SelectorBuilder = css_selector_builder) -> Fragment:
    return builder.element("a").attr('href$=".png"').pseudo_class("focus")


def build_editable_container_selector(builder: SelectorBuilder = css_selector_builder) -> Fragment:
    return builder.id("main").class_("container").class_("editable")


def build_sibling_table_selector(builder: SelectorBuilder = css_selector_builder) -> Fragment:
    # div#main.container.draggable + table#data ~ tr:nth-of-type(even) td:nth-of-type(even)
    return builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )


EXAMPLES = {
    "image_link": build_image_link_selector,
    "editable_container": build_editable_container_selector,
    "sibling_table": build_sibling_table_selector,
}

EXPECTED = {
    "image_link": 'a[href$=".png"]:focus',
    "editable_container": "#main.container.editable",
    "sibling_table": (
        "div#main.container.draggable + table#data ~ "
        "tr:nth-of-type(even) td:nth-of-type(even)"
    ),
}
