"""
src/i18n/document.py
────────────────────
Server-side model of the rendered page.

The page body is a Dash component tree; markers and ARIA flags are Dash
wildcard props (``data-*`` / ``aria-*``). The head (title, ``lang`` and meta
tags) cannot be rendered from a layout, so it is kept here and pushed to the
browser as a plain payload by a client-side callback.
"""
from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from dash import html
from dash.development.base_component import Component

from src.i18n.models import MetaTag

_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)


@dataclass
class Document:
    body: Component
    title: str = ""
    lang: str = ""
    meta: list[MetaTag] = field(default_factory=list)

    def find_meta(self, attribute: str, value: str) -> MetaTag | None:
        for tag in self.meta:
            if tag.matches(attribute, value):
                return tag
        return None

    def head(self) -> dict:
        """Title, language and meta tags as ``dcc.Store`` data."""
        return {
            "title": self.title,
            "lang": self.lang,
            "meta": [tag.model_dump(exclude_none=True) for tag in self.meta],
        }


# ── Tree helpers ──────────────────────────────────────────────────────────────

def walk(node) -> Iterator[Component]:
    """Depth-first, document-order traversal of every component under ``node``."""
    if isinstance(node, Component):
        yield node
        yield from walk(getattr(node, "children", None))
    elif isinstance(node, (list, tuple)):
        for child in node:
            yield from walk(child)


def get_prop(component: Component, name: str, default=None):
    return getattr(component, name, default)


def set_prop(component: Component, name: str, value) -> None:
    setattr(component, name, value)


def class_list(component: Component) -> list[str]:
    return (get_prop(component, "className") or "").split()


def has_class(component: Component, class_name: str) -> bool:
    return class_name in class_list(component)


def set_class(component: Component, class_name: str, enabled: bool) -> None:
    classes = [c for c in class_list(component) if c != class_name]
    if enabled:
        classes.append(class_name)
    set_prop(component, "className", " ".join(classes))


def find_by_class(root, class_name: str) -> Component | None:
    """First component under ``root`` carrying ``class_name``."""
    for component in walk(root):
        if has_class(component, class_name):
            return component
    return None


def find_all_with_prop(root, name: str) -> list[Component]:
    return [c for c in walk(root) if get_prop(c, name) is not None]


def render_markup(text: str):
    """
    Turn trusted inline markup into Dash children.

    Dictionary strings may contain ``<br>`` line breaks; those become
    ``html.Br()`` elements. Plain strings are returned unchanged.
    """
    parts = _LINE_BREAK.split(text)
    if len(parts) == 1:
        return text
    children = []
    for index, part in enumerate(parts):
        if index:
            children.append(html.Br())
        if part:
            children.append(part)
    return children
