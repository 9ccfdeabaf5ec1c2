"""React module generation for QuickReact component trees."""

from .context import build_app_context, build_component_context, build_index_context
from .main import (
    Artifact,
    ArtifactKind,
    create_react_engine,
    generate_artifacts,
    generate_react_project,
)
from .writer import WriteResult, write_artifacts

__all__ = [
    "Artifact",
    "ArtifactKind",
    "WriteResult",
    "build_app_context",
    "build_component_context",
    "build_index_context",
    "create_react_engine",
    "generate_artifacts",
    "generate_react_project",
    "write_artifacts",
]
