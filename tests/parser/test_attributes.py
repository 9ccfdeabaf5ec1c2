"""
Tests for attribute resolution and multiplier expansion.

Tests cover:
- Token classification (flags, choices, lists, unknown tokens)
- Element resolution from lexed tags
- Multiplier expressions: *N, *NN, [list], bare and absent families
- Repeated groups of the same family
- Hook queries
"""

import pytest

from quickreact.errors import QRSyntaxError
from quickreact.lang.attributes import (
    MAX_MULTIPLIER,
    REACT_HOOKS,
    ROUTER_HOOKS,
    AttributeKind,
    GeneratedName,
    apply_token,
    canonicalize_hooks,
    classify_token,
    declared_hooks,
    find_multiplier,
    has_hook,
    multiplier_count,
    multiplier_groups,
    parse_multiplier,
    resolve_element,
)
from quickreact.lang.element import Element, ElementCategory, TagKind
from quickreact.lang.lexer import RawTag


def component(**attributes):
    return Element("Widget", ElementCategory.COMPONENT, attributes)


def defaults(names):
    return [name.default for name in names]


class TestClassifyToken:
    """Test vocabulary lookups."""

    @pytest.mark.parametrize(
        "token,key",
        [
            ("form", "form"),
            ("FORM", "form"),
            ("router", "router"),
            ("bootstrap", "react-bootstrap"),
            ("reactBootstrap", "react-bootstrap"),
            ("react-bootstrap=true", "react-bootstrap"),
            ("switch", "switch"),
            ("map=true", "map"),
        ],
    )
    def test_flags(self, token, key):
        spec = classify_token(token)
        assert spec.kind is AttributeKind.FLAG
        assert spec.key == key
        assert spec.value is True

    @pytest.mark.parametrize("method", ["get", "post", "PUT", "Delete", "patch"])
    def test_fetch_methods(self, method):
        spec = classify_token(f"fetch={method}")
        assert spec.kind is AttributeKind.CHOICE
        assert spec.key == "fetch"
        assert spec.value == method.upper()

    def test_bare_hook_name_is_canonicalized(self):
        spec = classify_token("usestate")
        assert spec.kind is AttributeKind.LIST
        assert spec.key == "hooks"
        assert spec.value == "useState"

    def test_hook_with_multiplier(self):
        spec = classify_token("useeffect*2")
        assert (spec.key, spec.value) == ("hooks", "useEffect*2")

    def test_hook_with_oversized_multiplier_is_kept(self):
        spec = classify_token("useState*100")
        assert (spec.key, spec.value) == ("hooks", "useState*100")

    def test_hook_with_name_list(self):
        spec = classify_token("useContext[Theme,User]")
        assert (spec.key, spec.value) == ("hooks", "useContext[Theme,User]")

    def test_hooks_prefix(self):
        spec = classify_token("hooks=usestate*2,USEEFFECT")
        assert (spec.key, spec.value) == ("hooks", "useState*2,useEffect")

    @pytest.mark.parametrize("prefix", ["forminputs=", "FormInput="])
    def test_form_input_prefixes(self, prefix):
        spec = classify_token(f"{prefix}text*2,password")
        assert (spec.key, spec.value) == ("forminputs", "text*2,password")

    @pytest.mark.parametrize("token", ["forminputs=", "colour", "fetch=trace", "useless"])
    def test_unrecognized(self, token):
        assert classify_token(token) is None

    def test_canonicalize_hooks(self):
        assert canonicalize_hooks("uselocation,USEPARAMS*2") == "useLocation,useParams*2"


class TestApplyToken:
    """Test writing tokens into elements."""

    def test_list_tokens_accumulate(self):
        element = component()
        assert apply_token(element, "useState*2")
        assert apply_token(element, "useEffect")
        assert element.get_attribute("hooks") == "useState*2,useEffect"

    def test_flags_overwrite(self):
        element = component()
        apply_token(element, "fetch")
        apply_token(element, "fetch=get")
        assert element.get_attribute("fetch") == "GET"
        assert element.attribute_count() == 1

    def test_unknown_key_value_goes_to_extras(self):
        element = component()
        assert apply_token(element, "className=hero") is False
        assert element.extras == {"className": "hero"}
        assert element.attribute_count() == 0

    def test_unknown_bare_token_is_ignored(self):
        element = component()
        assert apply_token(element, "mystery") is False
        assert element.extras == {}


class TestResolveElement:
    """Test element construction from lexed tags."""

    def test_component_open_tag(self):
        tag = RawTag(TagKind.OPEN, ["App", "useState*3", "form", "router"])
        element = resolve_element(tag)
        assert element.name == "App"
        assert element.category is ElementCategory.COMPONENT
        assert element.is_open
        assert element.attributes == {"hooks": "useState*3", "form": True, "router": True}

    def test_config_tag(self):
        element = resolve_element(RawTag(TagKind.SELF_CLOSING, ["Config", "bootstrap"]))
        assert element.is_config
        assert element.attribute_equals("react-bootstrap", True)

    def test_config_closing_tag_is_config(self):
        element = resolve_element(RawTag(TagKind.CLOSE, ["/Config"]))
        assert element.is_config
        assert element.is_close

    def test_string_and_boolean_values_differ(self):
        element = resolve_element(RawTag(TagKind.OPEN, ["Form", "fetch=post"]))
        assert element.attribute_equals("fetch", "POST")
        assert not element.attribute_equals("fetch", True)


class TestGeneratedName:
    def test_case_variants(self):
        name = GeneratedName.from_text("LoginForm")
        assert name.default == "LoginForm"
        assert name.lower == "loginform"
        assert name.mixed == "Loginform"


class TestFindMultiplier:
    """Test multiplier expansion of a single occurrence."""

    def test_star_count(self):
        element = component(hooks="useState*3")
        names = find_multiplier(element, "useState", "appState")
        assert defaults(names) == ["appState1", "appState2", "appState3"]
        assert [name.lower for name in names] == ["appstate1", "appstate2", "appstate3"]
        assert [name.mixed for name in names] == ["Appstate1", "Appstate2", "Appstate3"]

    def test_two_digit_count(self):
        element = component(hooks="useState*12")
        assert multiplier_count(element, "useState", "appState") == 12

    def test_largest_count(self):
        element = component(hooks=f"useState*{MAX_MULTIPLIER}")
        assert multiplier_count(element, "useState", "appState") == MAX_MULTIPLIER

    def test_three_digit_count_is_rejected(self):
        """``*100`` is reported instead of silently expanding to one name."""
        element = component(forminputs="checkbox*100")
        with pytest.raises(QRSyntaxError, match="too large") as exc_info:
            find_multiplier(element, "checkbox", "checkbox")
        assert "checkbox*100" in exc_info.value.message
        assert exc_info.value.hint

    def test_bracketed_list(self):
        element = component(hooks="hooks[login,logout]")
        names = find_multiplier(element, "hooks", "hook")
        assert defaults(names) == ["login", "logout"]
        assert [name.mixed for name in names] == ["Login", "Logout"]

    def test_bracketed_list_entries_are_trimmed(self):
        element = component(hooks="useContext[ Theme , User ]")
        assert defaults(find_multiplier(element, "useContext", "SampleContext")) == ["Theme", "User"]

    def test_bare_family_yields_one_name(self):
        element = component(hooks="useState")
        assert defaults(find_multiplier(element, "useState", "appState")) == ["appState1"]

    def test_absent_family_yields_nothing(self):
        element = component(hooks="useEffect")
        assert find_multiplier(element, "useState", "appState") == []
        assert multiplier_count(element, "useState", "appState") == 0

    def test_family_must_be_whole_word(self):
        """``text`` does not match inside ``textarea``."""
        element = component(forminputs="textarea*2")
        assert find_multiplier(element, "text", "textfield") == []
        assert multiplier_count(element, "textarea", "textarea") == 2

    def test_search_restricted_to_keys(self):
        element = component(hooks="text", forminputs="password,text*2")
        names = find_multiplier(element, "text", "textfield", keys=("forminputs",))
        assert defaults(names) == ["textfield1", "textfield2"]

    def test_boolean_attributes_are_skipped(self):
        element = component(form=True, hooks="form*2")
        assert multiplier_count(element, "form", "form") == 2

    def test_match_index_selects_later_occurrence(self):
        element = component(hooks="useState[name,email],useEffect,useState*2")
        assert defaults(find_multiplier(element, "useState", "appState", 1)) == [
            "appState1",
            "appState2",
        ]
        assert find_multiplier(element, "useState", "appState", 2) == []

    @pytest.mark.parametrize("text,expected", [("useState*7", 7), ("useState*12", 12), ("useState", 1)])
    def test_parse_multiplier(self, text, expected):
        assert parse_multiplier(text) == expected

    def test_parse_multiplier_rejects_three_digits(self):
        with pytest.raises(QRSyntaxError):
            parse_multiplier("useState*100")


class TestMultiplierGroups:
    """Test iteration over repeated groups."""

    def test_groups_in_order(self):
        element = component(forminputs="checkbox[red,blue],text,checkbox*2")
        groups = list(multiplier_groups(element, "checkbox", "checkbox"))
        assert [defaults(group) for group in groups] == [["red", "blue"], ["checkbox1", "checkbox2"]]

    def test_no_groups(self):
        assert list(multiplier_groups(component(), "checkbox", "checkbox")) == []


class TestHooks:
    """Test hook presence queries."""

    def test_has_hook(self):
        element = component(hooks="useState*2,useEffect[load]")
        assert has_hook(element, "useState")
        assert has_hook(element, "useEffect")
        assert not has_hook(element, "useReducer")

    def test_has_hook_without_hooks_attribute(self):
        assert not has_hook(component(form=True), "useState")

    def test_declared_hooks_follow_candidate_order(self):
        element = component(hooks="useParams,useReducer,useEffect")
        assert declared_hooks(element, REACT_HOOKS) == ["useEffect", "useReducer"]
        assert declared_hooks(element, ROUTER_HOOKS) == ["useParams"]
