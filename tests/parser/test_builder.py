"""Tests for assembling elements into the component tree."""

import pytest

from quickreact.errors import QRSyntaxError
from quickreact.lang import MarkupParser, parse_markup
from quickreact.lang.builder import MISSING_APP_MESSAGE, build_tree


def names(nodes):
    return [node.value.name for node in nodes]


class TestTreeShape:
    """Test the structure of successfully built trees."""

    def test_minimal_document(self, minimal_markup):
        """Config root is synthesized; Header is App's only child."""
        tree = parse_markup(minimal_markup)
        assert len(tree) == 3
        root = tree.root
        assert root.value.is_config
        assert root.value.attribute_count() == 0
        assert names(root.children) == ["App"]
        app = root.children[0]
        assert names(app.children) == ["Header"]
        assert app.children[0].is_leaf

    def test_explicit_config_becomes_root(self):
        tree = parse_markup("<Config router bootstrap/><App></App>")
        config = tree.get_root_item()
        assert config.name == "Config"
        assert config.attribute_equals("router", True)
        assert config.attribute_equals("react-bootstrap", True)
        assert len(tree) == 2

    def test_config_after_app(self):
        tree = parse_markup("<App><Header/></App><Config router/>")
        assert tree.get_root_item().attribute_equals("router", True)
        assert names(tree.root.children) == ["App"]

    def test_config_with_closing_tag(self):
        tree = parse_markup("<Config router><App></App></Config>")
        assert len(tree) == 2
        assert tree.get_root_item().attribute_equals("router", True)

    def test_nesting_and_sibling_order(self):
        tree = parse_markup(
            "<App><Nav/><Main><Card/><Card/><List><Item/></List></Main><Footer/></App>"
        )
        app = tree.root.children[0]
        assert names(app.children) == ["Nav", "Main", "Footer"]
        main = app.children[1]
        assert names(main.children) == ["Card", "Card", "List"]
        assert names(main.children[2].children) == ["Item"]
        assert len(tree) == 9
        assert tree.height() == 5

    def test_repeated_names_stay_distinct(self):
        tree = parse_markup("<App><Card/><Card/></App>")
        first, second = tree.root.children[0].children
        assert first.value is not second.value

    def test_level_order_names(self, sample_tree):
        assert names(sample_tree) == ["Config", "App", "Header", "Main", "Footer", "Signup"]

    def test_each_parse_builds_a_new_tree(self, minimal_markup):
        parser = MarkupParser(minimal_markup)
        first = parser.parse()
        second = parser.parse()
        assert first is not second
        assert len(first) == len(second) == 3
        assert first.root.children[0].value is not second.root.children[0].value

    def test_deep_nesting(self):
        depth = 1200
        markup = (
            "<App>"
            + "".join(f"<C{index}>" for index in range(depth))
            + "".join(f"</C{index}>" for index in reversed(range(depth)))
            + "</App>"
        )
        tree = parse_markup(markup)
        assert len(tree) == depth + 2
        assert tree.height() == depth + 2
        assert tree.to_string().splitlines()[-1].strip() == f"Level:{depth + 2} - C{depth - 1}"

    def test_self_closing_app_inside_app_is_a_component(self):
        tree = parse_markup("<App><App/></App>")
        app = tree.root.children[0]
        assert names(app.children) == ["App"]
        assert app.children[0].value.is_self_closing


class TestTreeErrors:
    """Test malformed document diagnostics."""

    def test_missing_app(self):
        with pytest.raises(QRSyntaxError) as exc_info:
            parse_markup("<Header/><Footer></Footer>")
        assert exc_info.value.message == MISSING_APP_MESSAGE

    def test_self_closing_app_is_not_a_root(self):
        with pytest.raises(QRSyntaxError, match="opening <App>"):
            parse_markup("<App/>")

    def test_empty_document(self):
        with pytest.raises(QRSyntaxError, match="opening <App>"):
            parse_markup("")

    def test_missing_app_closer(self):
        with pytest.raises(QRSyntaxError) as exc_info:
            parse_markup("<App><Header/>")
        message = str(exc_info.value)
        assert "matching closing tag" in message
        assert "</App>" in message

    def test_missing_nested_closer(self):
        with pytest.raises(QRSyntaxError, match="</Main>"):
            parse_markup("<App><Main><Header/></App>")

    def test_mismatched_closer_names_both_tags(self):
        with pytest.raises(QRSyntaxError) as exc_info:
            parse_markup("<App><Foo></Bar></Foo></App>")
        message = str(exc_info.value)
        assert "can not overlap" in message
        assert "<Foo>" in message
        assert "</Bar>" in message

    def test_overlapping_tags(self):
        with pytest.raises(QRSyntaxError, match="<Bar> </Foo>"):
            parse_markup("<App><Foo><Bar></Foo></Bar></App>")

    def test_stray_closer_after_app(self):
        with pytest.raises(QRSyntaxError):
            parse_markup("<App></App></Extra>")

    def test_app_must_be_outermost(self):
        with pytest.raises(QRSyntaxError, match="can not overlap"):
            parse_markup("<Wrapper><App></App></Wrapper>")

    def test_duplicate_app(self):
        with pytest.raises(QRSyntaxError, match="exactly one opening <App>"):
            parse_markup("<App></App><App></App>")

    def test_duplicate_config(self):
        with pytest.raises(QRSyntaxError, match="at most one <Config>") as exc_info:
            parse_markup("<Config router/><Config bootstrap/><App></App>")
        assert exc_info.value.hint

    def test_build_tree_accepts_resolved_elements(self, minimal_markup):
        elements = MarkupParser(minimal_markup).elements()
        assert len(build_tree(elements)) == 3
