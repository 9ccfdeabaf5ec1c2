"""
Template contexts for the generated React modules.

Each builder reads one element's attributes (plus the config flags on the
tree root) and returns the plain dictionary the Jinja2 templates render.
Multiplier-driven declarations (contexts, reducers, state, effects and form
fields) are collected with ``multiplier_groups`` and numbered with a single
running index per family.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from quickreact.lang.attributes import (
    REACT_HOOKS,
    ROUTER_HOOKS,
    GeneratedName,
    declared_hooks,
    has_hook,
    multiplier_groups,
)
from quickreact.lang.element import Element
from quickreact.tree import NaryNode

BOOTSTRAP_IMPORTS = ["Container", "Row", "Col"]
BOOTSTRAP_FORM_IMPORTS = ["Container", "Row", "Col", "Form", "Button", "Alert"]

FORM_INPUT_KEYS = ("forminputs",)
DEFAULT_FETCH_METHOD = "POST"


def _flag(element: Optional[Element], key: str) -> bool:
    return element is not None and element.attribute_equals(key, True)


def _collect(
    element: Element,
    family: str,
    default_name: str,
    keys: Optional[Sequence[str]] = None,
) -> List[GeneratedName]:
    names: List[GeneratedName] = []
    for group in multiplier_groups(element, family, default_name, keys):
        names.extend(group)
    return names


def _numbered(names: Sequence[GeneratedName]) -> List[Dict[str, Any]]:
    return [{"index": index, "name": name} for index, name in enumerate(names, start=1)]


def _hooked(element: Element, hook: str, default_name: str) -> List[GeneratedName]:
    if not has_hook(element, hook):
        return []
    return _collect(element, hook, default_name)


def _form_fields(element: Element, bootstrap: bool) -> Dict[str, Any]:
    textarea_default = "textareafield" if bootstrap else "textarea"
    return {
        "text": _collect(element, "text", "textfield", FORM_INPUT_KEYS),
        "textarea": _collect(element, "textarea", textarea_default, FORM_INPUT_KEYS),
        "password": _collect(element, "password", "password", FORM_INPUT_KEYS),
        "checkbox": list(multiplier_groups(element, "checkbox", "checkbox", FORM_INPUT_KEYS)),
        "radio": list(multiplier_groups(element, "radio", "radio", FORM_INPUT_KEYS)),
        "select": list(multiplier_groups(element, "select", "select", FORM_INPUT_KEYS)),
    }


def _fetch_method(element: Element) -> str:
    value = element.get_attribute("fetch")
    if isinstance(value, str):
        return value
    return DEFAULT_FETCH_METHOD


def build_index_context(config: Element) -> Dict[str, Any]:
    """Context for ``index_qr.js``, driven only by the config element."""
    return {
        "router": _flag(config, "router"),
        "bootstrap": _flag(config, "react-bootstrap"),
    }


def _build_module_context(
    element: Element,
    node: NaryNode,
    config: Optional[Element],
    *,
    is_app: bool,
) -> Dict[str, Any]:
    bootstrap = _flag(config, "react-bootstrap")
    form = _flag(element, "form")

    react_hooks = declared_hooks(element, REACT_HOOKS)
    if form and "useState" not in react_hooks:
        # Form handlers read and write formValues1, so the state hook is implied.
        react_hooks.append("useState")

    router_imports = declared_hooks(element, ROUTER_HOOKS)
    for flag, symbol in (("switch", "Switch"), ("route", "Route"), ("link", "Link")):
        if _flag(element, flag):
            router_imports.append(symbol)

    bootstrap_imports: List[str] = []
    if bootstrap:
        bootstrap_imports = BOOTSTRAP_FORM_IMPORTS if form else BOOTSTRAP_IMPORTS

    contexts = _hooked(element, "useContext", "SampleContext")
    dispatch_contexts = _hooked(element, "useReducer", "SampleDispatchContext")
    reducers = _hooked(element, "useReducer", "sampleReducer")

    if form:
        states = _hooked(element, "useState", "formValues") or [GeneratedName.from_text("formValues1")]
    else:
        states = _hooked(element, "useState", "appState")

    effect_default = "sampleEffect" if is_app else "_handleGenericAsync"
    effects = _hooked(element, "useEffect", effect_default)

    providers = [
        {
            "open": f"<{name.mixed}.Provider value={{sampleState{index}}}>",
            "close": f"</{name.mixed}.Provider>",
        }
        for index, name in enumerate(contexts, start=1)
    ] + [
        {
            "open": f"<{name.mixed}.Provider value={{dispatch{index}}}>",
            "close": f"</{name.mixed}.Provider>",
        }
        for index, name in enumerate(dispatch_contexts, start=1)
    ]

    fields = _form_fields(element, bootstrap)
    passwords = fields["password"]

    return {
        "name": element.name,
        "is_app": is_app,
        "container_class": "App" if is_app else f"{element.name.lower()}-container",
        "react_hooks": react_hooks,
        "router_imports": router_imports,
        "bootstrap": bootstrap,
        "bootstrap_imports": bootstrap_imports,
        "children": [child.value.name for child in node.children],
        "child_import_prefix": "./components/" if is_app else "../",
        "parent_context_hint": not is_app and "useContext" in react_hooks,
        "contexts": contexts,
        "dispatch_contexts": dispatch_contexts,
        "reducers": _numbered(reducers),
        "form": form,
        "states": _numbered(states),
        "effects": _numbered(effects),
        "providers": providers,
        "uses_location": "useLocation" in router_imports,
        "uses_history": "useHistory" in router_imports,
        "uses_params": "useParams" in router_imports,
        "fetch_method": _fetch_method(element),
        "fields": fields,
        "has_fields": element.has_attribute("forminputs") and any(fields.values()),
        "password_field": passwords[0].lower if passwords else "password",
        "map": _flag(element, "map"),
        "switch": _flag(element, "switch"),
        "route": _flag(element, "route"),
        "link": _flag(element, "link"),
    }


def build_app_context(element: Element, node: NaryNode, config: Optional[Element] = None) -> Dict[str, Any]:
    """Context for ``App_qr.js``."""
    return _build_module_context(element, node, config, is_app=True)


def build_component_context(
    element: Element,
    node: NaryNode,
    config: Optional[Element] = None,
) -> Dict[str, Any]:
    """Context for ``components/<Name>/index.js``."""
    return _build_module_context(element, node, config, is_app=False)


__all__ = [
    "BOOTSTRAP_FORM_IMPORTS",
    "BOOTSTRAP_IMPORTS",
    "build_app_context",
    "build_component_context",
    "build_index_context",
]
