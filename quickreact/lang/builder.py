"""Assemble resolved elements into the QuickReact component tree."""

from __future__ import annotations

import logging
from typing import List, Sequence

from quickreact.errors import QRSyntaxError
from quickreact.tree import NaryNode, NaryTree

from .element import APP_TAG, Element, make_config_element

logger = logging.getLogger(__name__)

MISSING_APP_MESSAGE = (
    "The markup code must include an opening <App> component tag and closing </App> tag."
)


class TreeBuilder:
    """
    Build an ``NaryTree`` from elements in document order.

    The config element (or a synthesized one) becomes the root, the single
    ``App`` element its first child, and every other component is nested
    under the innermost open tag that encloses it. A fresh tree is created
    per ``build`` call and only returned once the whole document validates.
    """

    def build(self, elements: Sequence[Element]) -> NaryTree:
        tree = NaryTree()
        stack: List[NaryNode] = []

        root = self._place_config(tree, elements)
        stack.append(root)

        app = self._find_app(elements)
        stack.append(tree.add_as_first_child(app, root))

        self._check_closers(elements)

        for element in elements:
            # The App node was placed and pushed up front.
            if element.is_config or element is app:
                continue
            if element.is_open:
                stack.append(tree.add_as_last_child(element, stack[-1]))
            elif element.is_self_closing:
                tree.add_as_last_child(element, stack[-1])
            elif element.is_close:
                if not stack:
                    raise QRSyntaxError(
                        f"Found a closing tag <{element.name}> without a matching opening tag."
                    )
                opened = stack.pop()
                opened_name = opened.value.name
                if f"/{opened_name}" != element.name:
                    raise QRSyntaxError(
                        "Opening and closing tags for different components can not overlap. "
                        "Please check the placement of the following tags: "
                        f"<{opened_name}> <{element.name}>."
                    )

        logger.debug("Built component tree with %d nodes", len(tree))
        return tree

    @staticmethod
    def _place_config(tree: NaryTree, elements: Sequence[Element]) -> NaryNode:
        configs = [element for element in elements if element.is_config and not element.is_close]
        if len(configs) > 1:
            raise QRSyntaxError(
                "The markup code may include at most one <Config> tag.",
                hint="Merge the attributes of every <Config> tag into a single tag.",
            )
        if configs:
            config = configs[0]
        else:
            logger.debug("No <Config> tag found; synthesizing a default config root")
            config = make_config_element()
        tree.add(config)
        return tree.root

    @staticmethod
    def _find_app(elements: Sequence[Element]) -> Element:
        apps = [
            element
            for element in elements
            if not element.is_config and element.is_open and element.name == APP_TAG
        ]
        if not apps:
            raise QRSyntaxError(MISSING_APP_MESSAGE)
        if len(apps) > 1:
            raise QRSyntaxError(
                "The markup code must include exactly one opening <App> component tag.",
                hint="Wrap every top-level component inside a single <App> ... </App> pair.",
            )
        return apps[0]

    @staticmethod
    def _check_closers(elements: Sequence[Element]) -> None:
        closers = {element.name for element in elements if element.is_close}
        for element in elements:
            if element.is_config or not element.is_open:
                continue
            if f"/{element.name}" not in closers:
                raise QRSyntaxError(
                    "All components in the Quick-React markup, which are not self-closing, "
                    "must include a matching closing tag. Please include a closing tag: "
                    f"</{element.name}> for the {element.name} component."
                )


def build_tree(elements: Sequence[Element]) -> NaryTree:
    return TreeBuilder().build(elements)


__all__ = ["MISSING_APP_MESSAGE", "TreeBuilder", "build_tree"]
