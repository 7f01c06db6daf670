"""Attribute: one fragment of style intent wrapping a Rule."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable

from weft.style.rule import Declaration, Rule, merge_rules

__all__ = ["Attribute", "declare", "fold_attributes"]


@dataclass(frozen=True)
class Attribute:
    rule: Rule

    @property
    def extra_classes(self) -> tuple[str, ...]:
        return self.rule.extra_classes


def declare(prop: str, value: object) -> Attribute:
    """An attribute holding the single declaration ``prop:value``."""
    return Attribute(Rule(declarations=(Declaration(prop, str(value)),)))


def fold_attributes(attrs: Iterable[Attribute]) -> Rule:
    """Merge attribute rules left to right; later attributes win conflicts on normalize."""
    return reduce(merge_rules, (a.rule for a in attrs), Rule())
