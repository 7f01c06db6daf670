"""Weft style engine -- public re-exports."""

from weft.style.attribute import Attribute, declare, fold_attributes
from weft.style.compiler import (
    StyleClass,
    class_name_for,
    compile_class,
    compile_rule,
    fnv1a_32,
    render_stylesheet,
)
from weft.style.query import (
    ColorScheme,
    and_query,
    max_width,
    min_width,
    prefers_color_scheme,
    prefers_reduced_motion,
)
from weft.style.rule import Declaration, Rule, merge_rules, normalize_rule
from weft.style.scopes import (
    active,
    ancestor,
    container,
    dark,
    disabled,
    focus,
    focus_visible,
    group,
    group_class,
    group_hover,
    hide_below,
    hover,
    light,
    max_width_of,
    media,
    min_width_of,
    pseudo,
    reduced_motion,
    show_below,
)
from weft.style.serialize import serialize_rule
from weft.style.source import load_style_source, parse_style_source

__all__ = [
    # rule
    "Declaration",
    "Rule",
    "merge_rules",
    "normalize_rule",
    "serialize_rule",
    # attribute
    "Attribute",
    "declare",
    "fold_attributes",
    # compiler
    "StyleClass",
    "fnv1a_32",
    "class_name_for",
    "compile_class",
    "compile_rule",
    "render_stylesheet",
    # queries
    "ColorScheme",
    "min_width",
    "max_width",
    "prefers_reduced_motion",
    "prefers_color_scheme",
    "and_query",
    # scopes
    "pseudo",
    "hover",
    "focus",
    "focus_visible",
    "active",
    "disabled",
    "media",
    "container",
    "ancestor",
    "group",
    "group_class",
    "group_hover",
    "dark",
    "light",
    "reduced_motion",
    "min_width_of",
    "max_width_of",
    "hide_below",
    "show_below",
    # source
    "parse_style_source",
    "load_style_source",
]
