"""Rule model: declarations plus recursively nested scoped sub-rules.

A Rule is built by merging attribute fragments and then normalized once at
compile time.  Merging only concatenates; every conflict is resolved by
normalization (last declaration per property wins, everything sorted), which
keeps merge associative.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

__all__ = ["Declaration", "Rule", "merge_rules", "normalize_rule", "SCOPE_FIELDS"]

# Keyed sub-rule collections, in serialization order.
SCOPE_FIELDS = ("pseudos", "medias", "containers", "ancestors")


@dataclass(frozen=True)
class Declaration:
    """A single ``property:value`` pair."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}:{self.value};"


@dataclass(frozen=True, eq=False)
class Rule:
    """A tree of declarations and scoped sub-rules.

    The keyed collections are stored as read-only mappings, so a Rule (and any
    class compiled from it) cannot change after construction.  Equality and
    hashing respect key order, because key order is rendered order.

    Attributes:
        declarations: Declarations in insertion order (duplicates allowed until
            normalized).
        pseudos: Pseudo-class name (``"hover"``) -> nested rule.
        medias: Media query string -> nested rule.
        containers: Container query string -> nested rule.
        ancestors: Compound selector prefix (``".weft-group-card:hover "``) ->
            nested rule.
        extra_classes: Static class names attached next to the generated one.
    """

    declarations: tuple[Declaration, ...] = ()
    pseudos: Mapping[str, Rule] = field(default_factory=dict)
    medias: Mapping[str, Rule] = field(default_factory=dict)
    containers: Mapping[str, Rule] = field(default_factory=dict)
    ancestors: Mapping[str, Rule] = field(default_factory=dict)
    extra_classes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "declarations", tuple(self.declarations))
        object.__setattr__(self, "extra_classes", tuple(self.extra_classes))
        for name in SCOPE_FIELDS:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def _key(self) -> tuple:
        return (
            self.declarations,
            *(tuple(scope.items()) for _, scope in self.scopes()),
            self.extra_classes,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # --- construction ---------------------------------------------------------

    @classmethod
    def of(cls, *pairs: tuple[str, str]) -> Rule:
        """Build a rule from ``(property, value)`` pairs."""
        return cls(declarations=tuple(Declaration(p, v) for p, v in pairs))

    @property
    def is_empty(self) -> bool:
        return not (
            self.declarations
            or self.extra_classes
            or any(getattr(self, name) for name in SCOPE_FIELDS)
        )

    def scopes(self) -> Iterable[tuple[str, Mapping[str, Rule]]]:
        """Yield ``(field_name, collection)`` for each keyed collection."""
        for name in SCOPE_FIELDS:
            yield name, getattr(self, name)

    def without_extra_classes(self) -> Rule:
        """A copy with extra classes stripped at every level."""
        return Rule(
            declarations=self.declarations,
            **{
                name: {key: sub.without_extra_classes() for key, sub in scope.items()}
                for name, scope in self.scopes()
            },
        )

    def collect_extra_classes(self) -> tuple[str, ...]:
        """Extra classes of this rule followed by those of every nested rule."""
        found = list(self.extra_classes)
        for _, scope in self.scopes():
            for sub in scope.values():
                found.extend(sub.collect_extra_classes())
        return tuple(found)

    # --- algebra --------------------------------------------------------------

    def merge(self, other: Rule) -> Rule:
        return merge_rules(self, other)

    def normalize(self) -> Rule:
        return normalize_rule(self)

    # --- plain data -----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form; empty parts are omitted."""
        data: dict[str, Any] = {}
        if self.declarations:
            data["declarations"] = [[d.property, d.value] for d in self.declarations]
        for name, scope in self.scopes():
            if scope:
                data[name] = {key: sub.to_dict() for key, sub in scope.items()}
        if self.extra_classes:
            data["extra_classes"] = list(self.extra_classes)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rule:
        """Inverse of :meth:`to_dict`. Structural checks live in the source loader."""
        return cls(
            declarations=tuple(
                Declaration(str(prop), str(value))
                for prop, value in data.get("declarations", [])
            ),
            extra_classes=tuple(str(c) for c in data.get("extra_classes", [])),
            **{
                name: {str(key): cls.from_dict(sub) for key, sub in data.get(name, {}).items()}
                for name in SCOPE_FIELDS
            },
        )


def _merge_scope(a: Mapping[str, Rule], b: Mapping[str, Rule]) -> dict[str, Rule]:
    """Merge keyed collections: shared keys merge in a's position, new keys append."""
    merged = dict(a)
    for key, sub in b.items():
        if key in merged:
            merged[key] = merge_rules(merged[key], sub)
        else:
            merged[key] = sub
    return merged


def merge_rules(a: Rule, b: Rule) -> Rule:
    """Concatenate *b* onto *a* without resolving any conflict."""
    return Rule(
        declarations=a.declarations + b.declarations,
        extra_classes=a.extra_classes + b.extra_classes,
        **{name: _merge_scope(getattr(a, name), getattr(b, name)) for name in SCOPE_FIELDS},
    )


def _dedupe_declarations(declarations: tuple[Declaration, ...]) -> tuple[Declaration, ...]:
    """Keep the last declaration per property, sorted by property name."""
    seen: set[str] = set()
    kept: list[Declaration] = []
    for decl in reversed(declarations):
        if decl.property in seen:
            continue
        seen.add(decl.property)
        kept.append(decl)
    return tuple(sorted(kept, key=lambda d: d.property))


def normalize_rule(rule: Rule) -> Rule:
    """Canonicalize *rule*: duplicate-free, sorted, recursively. Idempotent."""
    return Rule(
        declarations=_dedupe_declarations(rule.declarations),
        extra_classes=tuple(sorted(set(rule.extra_classes))),
        **{
            name: {key: normalize_rule(scope[key]) for key in sorted(scope)}
            for name, scope in rule.scopes()
        },
    )
