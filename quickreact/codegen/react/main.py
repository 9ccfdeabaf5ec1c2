"""
Main orchestration module for QuickReact project generation.

Walks a parsed component tree in level order and renders one JavaScript
module per node:

    output_dir/
    ├── index_qr.js           (config node)
    ├── App_qr.js             (App node)
    ├── components/
    │   └── <Name>/index.js   (every other component)
    ├── images/
    └── assets/
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from quickreact.config import OutputLayout
from quickreact.errors import QRArgumentError
from quickreact.lang.element import Element
from quickreact.templates import SourceTemplateEngine, create_engine
from quickreact.tree import NaryTree

from .context import build_app_context, build_component_context, build_index_context
from .templates import INDEX_TEMPLATE_NAME, MODULE_TEMPLATE_NAME, TEMPLATE_SOURCES
from .writer import ConfirmCallback, WriteResult, write_artifacts

logger = logging.getLogger(__name__)


class ArtifactKind(str, Enum):
    INDEX = "index"
    APP = "app"
    COMPONENT = "component"


@dataclass
class Artifact:
    """One generated file: its kind, source element, relative path and text."""

    kind: ArtifactKind
    element: Element
    path: str
    content: str
    children: List[Element] = field(default_factory=list)


def create_react_engine() -> SourceTemplateEngine:
    """Template engine with the React module templates registered."""
    engine = create_engine()
    engine.register_many(TEMPLATE_SOURCES)
    return engine


def generate_artifacts(
    tree: NaryTree,
    *,
    engine: Optional[SourceTemplateEngine] = None,
    layout: Optional[OutputLayout] = None,
) -> List[Artifact]:
    """
    Render every node of ``tree`` into an ``Artifact``.

    Args:
        tree: Component tree produced by ``parse_markup``
        engine: Template engine; one with the React templates is created if omitted
        layout: Output layout naming the generated files

    Returns:
        Artifacts in level order: index, App, then components

    Raises:
        QRArgumentError: If tree is not an ``NaryTree``
        TemplateRenderError: If a template fails to render
    """
    if not isinstance(tree, NaryTree):
        raise QRArgumentError("Project files can only be generated from a Quick-React n-ary tree.")
    if engine is None:
        engine = create_react_engine()
    layout = layout or OutputLayout()

    config = tree.get_root_item()
    root = tree.root
    app_node = root.children[0] if root is not None and root.children else None
    artifacts: List[Artifact] = []
    for node in tree.level_order():
        element: Element = node.value
        children = [child.value for child in node.children]

        if node is root:
            kind = ArtifactKind.INDEX
            path = layout.index_file
            content = engine.render_template(INDEX_TEMPLATE_NAME, build_index_context(element))
        elif node is app_node:
            kind = ArtifactKind.APP
            path = layout.app_file
            content = engine.render_template(MODULE_TEMPLATE_NAME, build_app_context(element, node, config))
        else:
            kind = ArtifactKind.COMPONENT
            path = layout.component_path(element.name)
            content = engine.render_template(
                MODULE_TEMPLATE_NAME, build_component_context(element, node, config)
            )

        artifacts.append(Artifact(kind=kind, element=element, path=path, content=content, children=children))

    logger.debug("Rendered %d artifacts", len(artifacts))
    return artifacts


def generate_react_project(
    tree: NaryTree,
    output_dir: Path,
    *,
    engine: Optional[SourceTemplateEngine] = None,
    layout: Optional[OutputLayout] = None,
    confirm: Optional[ConfirmCallback] = None,
) -> WriteResult:
    """Render ``tree`` and write the resulting files below ``output_dir``."""
    layout = layout or OutputLayout()
    artifacts = generate_artifacts(tree, engine=engine, layout=layout)
    result = write_artifacts(artifacts, Path(output_dir), layout=layout, confirm=confirm)
    if not result.cancelled:
        logger.info("Generated %d files in %s", len(result.written), output_dir)
    return result


__all__ = [
    "Artifact",
    "ArtifactKind",
    "create_react_engine",
    "generate_artifacts",
    "generate_react_project",
]
