"""Tests for CSS serialization of rule trees."""

from weft.style import Rule, serialize_rule


class TestDeclarations:
    def test_declaration_block(self):
        r = Rule.of(("color", "red"), ("padding", "4px"))
        assert serialize_rule(".a", r) == ".a{color:red;padding:4px;}"

    def test_empty_rule_renders_nothing(self):
        assert serialize_rule(".a", Rule()) == ""

    def test_extra_classes_are_not_rendered(self):
        assert serialize_rule(".a", Rule(extra_classes=("x",))) == ""


class TestScopes:
    def test_pseudo(self):
        r = Rule(pseudos={"hover": Rule.of(("color", "blue"))})
        assert serialize_rule(".a", r) == ".a:hover{color:blue;}"

    def test_media(self):
        r = Rule(medias={"(min-width:600px)": Rule.of(("padding", "8px"))})
        assert serialize_rule(".a", r) == "@media (min-width:600px){\n.a{padding:8px;}\n}"

    def test_container(self):
        r = Rule(containers={"(min-width:300px)": Rule.of(("gap", "2px"))})
        assert serialize_rule(".a", r) == "@container (min-width:300px){\n.a{gap:2px;}\n}"

    def test_ancestor(self):
        r = Rule(ancestors={".g:hover ": Rule.of(("color", "red"))})
        assert serialize_rule(".a", r) == ".g:hover .a{color:red;}"

    def test_nested_pseudo_inside_media(self):
        r = Rule(medias={"(min-width:600px)": Rule(pseudos={"hover": Rule.of(("color", "red"))})})
        assert serialize_rule(".a", r) == "@media (min-width:600px){\n.a:hover{color:red;}\n}"

    def test_empty_scope_renders_nothing(self):
        r = Rule(medias={"(min-width:600px)": Rule()}, pseudos={"hover": Rule()})
        assert serialize_rule(".a", r) == ""


class TestOrdering:
    def test_fixed_collection_order(self):
        r = Rule(
            declarations=Rule.of(("color", "red")).declarations,
            ancestors={".g:hover ": Rule.of(("d", "4"))},
            containers={"(c)": Rule.of(("c", "3"))},
            medias={"(m)": Rule.of(("b", "2"))},
            pseudos={"hover": Rule.of(("a", "1"))},
        )
        assert serialize_rule(".a", r) == (
            ".a{color:red;}"
            ".a:hover{a:1;}"
            "@media (m){\n.a{b:2;}\n}"
            "@container (c){\n.a{c:3;}\n}"
            ".g:hover .a{d:4;}"
        )
