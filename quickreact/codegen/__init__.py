"""Code generators for QuickReact component trees."""

from .react import generate_artifacts, generate_react_project

__all__ = ["generate_artifacts", "generate_react_project"]
