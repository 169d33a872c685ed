"""
src/i18n/binder.py
──────────────────
Writes translations into a Document.

Binding is two-phase:
  1. collect_bindings() scans the component tree for markers and returns
     (component, key path, slot) triples
  2. apply_bindings() resolves each key and writes the result into its slot

A slot is either "children" (text content, inline markup allowed) or the
name of the attribute to overwrite. Only dash.html components accept data-*
markers, so an attribute marker on a component that has no such attribute
(a wrapping html.Div) binds to the first descendant that does, e.g. the
dcc.Input inside it. A slot is only written when the lookup
produced a real translation, i.e. something other than the key path itself,
so untranslated markup keeps its source text.

apply_translations() runs both phases, then updates the document head and
the language switcher. It is idempotent.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from dash.development.base_component import Component

from config.languages import (
    ATTRIBUTE_CATEGORIES,
    METADATA_TARGETS,
    TEXT_MARKER,
    TITLE_KEY,
    attribute_marker,
)
from src.i18n.document import Document, get_prop, render_markup, set_prop, walk

logger = logging.getLogger(__name__)

TEXT_SLOT = "children"

Translate = Callable[[str], str]


@dataclass(frozen=True)
class Binding:
    component: Component
    key_path: str
    slot: str


def _is_translated(value: str, key_path: str) -> bool:
    return bool(value) and value != key_path


def accepts(component: Component, attribute: str) -> bool:
    if attribute in getattr(component, "_prop_names", ()):
        return True
    wildcards = getattr(component, "_valid_wildcard_attributes", ())
    return any(attribute.startswith(prefix) for prefix in wildcards)


def attribute_target(component: Component, attribute: str) -> Component | None:
    """The component itself, or the first descendant that has `attribute`."""
    if accepts(component, attribute):
        return component
    for child in walk(get_prop(component, TEXT_SLOT)):
        if accepts(child, attribute):
            return child
    return None


def collect_bindings(document: Document) -> list[Binding]:
    """Phase 1: text markers first, then one pass per attribute category."""
    components = list(walk(document.body))
    bindings = [
        Binding(c, get_prop(c, TEXT_MARKER), TEXT_SLOT)
        for c in components
        if get_prop(c, TEXT_MARKER)
    ]
    for attribute in ATTRIBUTE_CATEGORIES:
        marker = attribute_marker(attribute)
        for c in components:
            key_path = get_prop(c, marker)
            if not key_path:
                continue
            target = attribute_target(c, attribute)
            if target is None:
                logger.debug("No component under %s accepts %r", type(c).__name__, attribute)
                continue
            bindings.append(Binding(target, key_path, attribute))
    return bindings


def apply_bindings(bindings: list[Binding], translate: Translate) -> int:
    """Phase 2: resolve and write. Returns the number of slots written."""
    written = 0
    for binding in bindings:
        value = translate(binding.key_path)
        if not _is_translated(value, binding.key_path):
            continue
        if binding.slot == TEXT_SLOT:
            set_prop(binding.component, TEXT_SLOT, render_markup(value))
        else:
            set_prop(binding.component, binding.slot, value)
        written += 1
    return written


def apply_head(document: Document, translate: Translate, language: str) -> None:
    """Title and metadata are not marker-driven; absent meta tags are skipped."""
    title = translate(TITLE_KEY)
    if _is_translated(title, TITLE_KEY):
        document.title = title

    for attribute, value, key_path in METADATA_TARGETS:
        tag = document.find_meta(attribute, value)
        if tag is None:
            continue
        content = translate(key_path)
        if _is_translated(content, key_path):
            tag.content = content

    document.lang = language


def apply_translations(
    document: Document,
    translate: Translate,
    language: str,
    switcher=None,
) -> None:
    bindings = collect_bindings(document)
    written = apply_bindings(bindings, translate)
    logger.debug("Applied %d/%d translation bindings (%s)", written, len(bindings), language)

    apply_head(document, translate, language)

    if switcher is not None:
        switcher.refresh(language)
