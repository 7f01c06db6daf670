"""Serialize a Rule tree to CSS text against a selector.

Output order is fixed: the declaration block, then pseudo-class rules, media
rules, container rules and ancestor-scoped rules, each collection in its own
(normalized) key order.  Extra classes are structural and never rendered.
"""

from __future__ import annotations

from weft.style.rule import Rule

__all__ = ["serialize_rule", "serialize_declarations"]


def serialize_declarations(selector: str, rule: Rule) -> str:
    """``selector{prop:value;...}`` or the empty string when there is nothing to declare."""
    if not rule.declarations:
        return ""
    body = "".join(str(decl) for decl in rule.declarations)
    return f"{selector}{{{body}}}"


def _at_rule(keyword: str, query: str, inner: str) -> str:
    if not inner:
        return ""
    return f"@{keyword} {query}{{\n{inner}\n}}"


def serialize_rule(selector: str, rule: Rule) -> str:
    """Render *rule* (and every nested scope) for *selector*."""
    parts = [serialize_declarations(selector, rule)]
    for pseudo, nested in rule.pseudos.items():
        parts.append(serialize_rule(f"{selector}:{pseudo}", nested))
    for query, nested in rule.medias.items():
        parts.append(_at_rule("media", query, serialize_rule(selector, nested)))
    for query, nested in rule.containers.items():
        parts.append(_at_rule("container", query, serialize_rule(selector, nested)))
    for prefix, nested in rule.ancestors.items():
        # The prefix carries its own combinator, e.g. ".weft-group-card:hover ".
        parts.append(serialize_rule(prefix + selector, nested))
    return "".join(parts)
