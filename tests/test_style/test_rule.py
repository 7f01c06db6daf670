"""Tests for the rule model: merge and normalization."""

import pytest

from weft.style import Declaration, Rule, merge_rules, normalize_rule


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _decls(rule: Rule) -> list[tuple[str, str]]:
    return [(d.property, d.value) for d in rule.declarations]


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


class TestMerge:
    def test_declarations_concatenate(self):
        a = Rule.of(("color", "red"))
        b = Rule.of(("color", "blue"), ("padding", "4px"))
        merged = merge_rules(a, b)
        assert _decls(merged) == [("color", "red"), ("color", "blue"), ("padding", "4px")]

    def test_shared_key_merges_in_place(self):
        a = Rule(pseudos={"hover": Rule.of(("color", "red")), "focus": Rule.of(("outline", "0"))})
        b = Rule(pseudos={"active": Rule.of(("color", "green")), "hover": Rule.of(("padding", "1px"))})
        merged = a.merge(b)
        assert list(merged.pseudos) == ["hover", "focus", "active"]
        assert _decls(merged.pseudos["hover"]) == [("color", "red"), ("padding", "1px")]

    def test_extra_classes_concatenate(self):
        merged = merge_rules(Rule(extra_classes=("b",)), Rule(extra_classes=("a", "b")))
        assert merged.extra_classes == ("b", "a", "b")

    def test_associative(self):
        a = Rule.of(("color", "red"))
        b = Rule(medias={"(min-width:600px)": Rule.of(("padding", "1px"))})
        c = Rule(
            declarations=(Declaration("color", "blue"),),
            medias={"(min-width:600px)": Rule.of(("padding", "2px"))},
        )
        assert merge_rules(merge_rules(a, b), c) == merge_rules(a, merge_rules(b, c))

    def test_inputs_are_not_mutated(self):
        a = Rule(pseudos={"hover": Rule.of(("color", "red"))})
        b = Rule(pseudos={"hover": Rule.of(("color", "blue"))})
        before_a, before_b = a.to_dict(), b.to_dict()
        merge_rules(a, b)
        assert a.to_dict() == before_a
        assert b.to_dict() == before_b

    def test_empty_rule_is_identity(self):
        r = Rule.of(("color", "red"))
        assert merge_rules(Rule(), r) == r
        assert merge_rules(r, Rule()) == r


# ---------------------------------------------------------------------------
# Normalize
# ---------------------------------------------------------------------------


class TestNormalize:
    def test_last_write_wins(self):
        r = normalize_rule(Rule.of(("padding", "1px"), ("color", "red"), ("padding", "2px")))
        assert _decls(r) == [("color", "red"), ("padding", "2px")]

    def test_sorted_by_property(self):
        r = normalize_rule(Rule.of(("z-index", "1"), ("color", "red"), ("align-items", "center")))
        assert [d.property for d in r.declarations] == ["align-items", "color", "z-index"]

    def test_sort_is_ordinal(self):
        r = normalize_rule(Rule.of(("b", "1"), ("B", "2"), ("-webkit-x", "3")))
        assert [d.property for d in r.declarations] == ["-webkit-x", "B", "b"]

    def test_scopes_sorted_and_nested_normalized(self):
        r = normalize_rule(
            Rule(
                medias={
                    "(min-width:900px)": Rule.of(("padding", "1px"), ("padding", "3px")),
                    "(min-width:600px)": Rule.of(("gap", "2px")),
                }
            )
        )
        assert list(r.medias) == ["(min-width:600px)", "(min-width:900px)"]
        assert _decls(r.medias["(min-width:900px)"]) == [("padding", "3px")]

    def test_extra_classes_deduped_and_sorted(self):
        r = normalize_rule(Rule(extra_classes=("b", "a", "b")))
        assert r.extra_classes == ("a", "b")

    def test_idempotent(self):
        r = Rule(
            declarations=(Declaration("color", "red"), Declaration("color", "blue")),
            pseudos={"hover": Rule.of(("b", "1"), ("a", "2"))},
            ancestors={".g:hover ": Rule.of(("x", "1"))},
            extra_classes=("z", "y", "z"),
        )
        once = normalize_rule(r)
        twice = normalize_rule(once)
        assert twice == once
        assert twice.to_dict() == once.to_dict()

    def test_idempotent_keeps_key_order(self):
        r = Rule(medias={"(b)": Rule.of(("x", "1")), "(a)": Rule.of(("y", "2"))})
        once = normalize_rule(r)
        assert list(once.medias) == ["(a)", "(b)"]
        assert list(normalize_rule(once).medias) == list(once.medias)


# ---------------------------------------------------------------------------
# Construction / plain data
# ---------------------------------------------------------------------------


class TestRuleData:
    def test_is_empty(self):
        assert Rule().is_empty
        assert not Rule.of(("color", "red")).is_empty
        assert not Rule(extra_classes=("x",)).is_empty

    def test_to_dict_omits_empty_parts(self):
        assert Rule().to_dict() == {}
        assert Rule.of(("color", "red")).to_dict() == {"declarations": [["color", "red"]]}

    def test_from_dict(self):
        r = Rule.from_dict(
            {
                "declarations": [["color", "red"]],
                "pseudos": {"hover": {"declarations": [["color", "blue"]]}},
                "extra_classes": ["weft-group-card"],
            }
        )
        assert _decls(r) == [("color", "red")]
        assert _decls(r.pseudos["hover"]) == [("color", "blue")]
        assert r.extra_classes == ("weft-group-card",)
        assert Rule.from_dict(r.to_dict()) == r

    def test_without_and_collect_extra_classes(self):
        r = Rule(extra_classes=("a",), pseudos={"hover": Rule(extra_classes=("b",))})
        assert r.collect_extra_classes() == ("a", "b")
        stripped = r.without_extra_classes()
        assert stripped.collect_extra_classes() == ()
        assert "hover" in stripped.pseudos

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Rule().declarations = ()  # type: ignore[misc]


class TestRuleImmutability:
    def test_scopes_are_read_only(self):
        r = Rule(pseudos={"hover": Rule.of(("color", "red"))})
        with pytest.raises(TypeError):
            r.pseudos["hover"] = Rule.of(("color", "blue"))  # type: ignore[index]
        with pytest.raises(TypeError):
            r.medias["(a)"] = Rule()  # type: ignore[index]

    def test_caller_dict_is_copied(self):
        scope = {"hover": Rule.of(("color", "red"))}
        r = Rule(pseudos=scope)
        scope["focus"] = Rule.of(("color", "blue"))
        assert list(r.pseudos) == ["hover"]

    def test_hashable(self):
        a = Rule(pseudos={"hover": Rule.of(("color", "red"))}, extra_classes=("x",))
        b = Rule(pseudos={"hover": Rule.of(("color", "red"))}, extra_classes=("x",))
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_equality_respects_key_order(self):
        x, y = Rule.of(("a", "1")), Rule.of(("b", "2"))
        assert Rule(pseudos={"b": x, "a": y}) != Rule(pseudos={"a": y, "b": x})
        assert Rule(pseudos={"a": y, "b": x}) == Rule(pseudos={"a": y, "b": x})
