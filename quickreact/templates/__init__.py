"""Sandboxed Jinja2 template engine for generated sources."""

from .engine import (
    CompiledTemplate,
    SourceTemplateEngine,
    TemplateCompilationError,
    TemplateError,
    TemplateRenderError,
    TemplateSecurityError,
    create_engine,
)

__all__ = [
    "CompiledTemplate",
    "SourceTemplateEngine",
    "TemplateCompilationError",
    "TemplateError",
    "TemplateRenderError",
    "TemplateSecurityError",
    "create_engine",
]
