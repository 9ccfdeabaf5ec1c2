"""
Sandboxed Jinja2 engine used to render generated JavaScript sources.

Templates are registered by name, compiled once per engine and cached.
Rendering runs in a ``SandboxedEnvironment`` with ``StrictUndefined`` so a
context builder that forgets a variable fails loudly instead of emitting
half-written code.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from jinja2 import StrictUndefined, TemplateSyntaxError, Undefined, UndefinedError
from jinja2.meta import find_undeclared_variables
from jinja2.sandbox import SandboxedEnvironment

logger = logging.getLogger(__name__)


class TemplateError(Exception):
    """Base exception for template engine errors."""

    code = "TEMPLATE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        template_name: Optional[str] = None,
        line_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.template_name = template_name
        self.line_number = line_number
        self.original_error = original_error
        self.hint: Optional[str] = None

    def format(self) -> str:
        location = self.template_name or "<template>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        return f"{self.message} ({self.code} in {location})"


class TemplateSecurityError(TemplateError):
    """Raised when a template attempts unsafe operations."""

    code = "TEMPLATE_SECURITY_ERROR"


class TemplateCompilationError(TemplateError):
    """Raised when template compilation fails."""

    code = "TEMPLATE_COMPILATION_ERROR"


class TemplateRenderError(TemplateError):
    """Raised when template rendering fails."""

    code = "TEMPLATE_RENDER_ERROR"


@dataclass
class CompiledTemplate:
    """A compiled template ready to be rendered with different contexts."""

    name: str
    source: str
    template: Any  # jinja2.Template
    required_vars: Set[str]

    def render(self, variables: Mapping[str, Any]) -> str:
        """
        Render the template with ``variables``.

        Raises:
            TemplateRenderError: If a variable is missing or rendering fails
        """
        try:
            return self.template.render(**variables)
        except UndefinedError as e:
            raise TemplateRenderError(
                f"Undefined variable in template: {e}",
                template_name=self.name,
                original_error=e,
            ) from e
        except Exception as e:
            raise TemplateRenderError(
                f"Template rendering failed: {e}",
                template_name=self.name,
                original_error=e,
            ) from e


def _filter_js_string(value: Any) -> str:
    """Encode a value as a JavaScript string literal."""
    return json.dumps(str(value), ensure_ascii=False)


def _filter_list_join(value: Iterable[Any], separator: str = ", ") -> str:
    if isinstance(value, str):
        return value
    return separator.join(str(item) for item in value)


def _filter_mixed(value: Any) -> str:
    """Lower-case a name and upper-case its first letter."""
    text = str(value).lower()
    return text[:1].upper() + text[1:]


_DANGEROUS_PATTERNS = (
    "__import__",
    "__builtins__",
    "__class__",
    "__bases__",
    "__subclasses__",
    "__globals__",
)


class SourceTemplateEngine:
    """
    Template engine that renders JavaScript modules from named templates.

    Templates run sandboxed with only a handful of safe globals. Blocks are
    trimmed so ``{% if %}`` lines do not leave blank lines in the output,
    and a trailing newline in the template is preserved.
    """

    def __init__(
        self,
        *,
        strict_undefined: bool = True,
        custom_filters: Optional[Dict[str, Any]] = None,
    ):
        undefined_class = StrictUndefined if strict_undefined else Undefined
        self.env = SandboxedEnvironment(
            autoescape=False,
            undefined=undefined_class,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["js_string"] = _filter_js_string
        self.env.filters["list_join"] = _filter_list_join
        self.env.filters["mixed"] = _filter_mixed
        if custom_filters:
            for name, func in custom_filters.items():
                self.env.filters[name] = func

        self.env.globals = {
            "range": range,
            "len": len,
            "enumerate": enumerate,
            "reversed": reversed,
        }
        self._sources: Dict[str, str] = {}
        self._compiled: Dict[str, CompiledTemplate] = {}

    def register(self, name: str, source: str) -> None:
        """Register (or replace) the template source stored under ``name``."""
        self._sources[name] = source
        self._compiled.pop(name, None)

    def register_many(self, sources: Mapping[str, str]) -> None:
        for name, source in sources.items():
            self.register(name, source)

    @property
    def template_names(self) -> List[str]:
        return sorted(self._sources)

    def compile(self, source: str, *, name: str = "<template>") -> CompiledTemplate:
        """
        Compile a template from a source string.

        Raises:
            TemplateSecurityError: If the source references dunder internals
            TemplateCompilationError: If the source is not valid Jinja2
        """
        for pattern in _DANGEROUS_PATTERNS:
            if pattern in source:
                raise TemplateSecurityError(
                    f"Template contains dangerous pattern: {pattern}",
                    template_name=name,
                )
        try:
            ast = self.env.parse(source)
            template = self.env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateCompilationError(
                f"Template syntax error: {e.message}",
                template_name=name,
                line_number=e.lineno,
                original_error=e,
            ) from e
        return CompiledTemplate(
            name=name,
            source=source,
            template=template,
            required_vars=find_undeclared_variables(ast),
        )

    def get_template(self, name: str) -> CompiledTemplate:
        """Return the compiled template registered as ``name``, compiling it on first use."""
        compiled = self._compiled.get(name)
        if compiled is not None:
            return compiled
        if name not in self._sources:
            raise TemplateCompilationError(
                f"Unknown template '{name}'",
                template_name=name,
            )
        compiled = self.compile(self._sources[name], name=name)
        self._compiled[name] = compiled
        logger.debug("Compiled template %s (%d variables)", name, len(compiled.required_vars))
        return compiled

    def render_template(self, name: str, variables: Mapping[str, Any]) -> str:
        return self.get_template(name).render(variables)

    def render(self, template_source: str, variables: Mapping[str, Any], *, name: str = "<template>") -> str:
        """Compile and render a one-off template source."""
        return self.compile(template_source, name=name).render(variables)

    def missing_variables(self, name: str, variables: Mapping[str, Any]) -> List[str]:
        """Names a registered template needs that ``variables`` does not provide."""
        compiled = self.get_template(name)
        return sorted(var for var in compiled.required_vars if var not in variables)


def create_engine(
    *,
    strict_undefined: bool = True,
    custom_filters: Optional[Dict[str, Any]] = None,
) -> SourceTemplateEngine:
    return SourceTemplateEngine(strict_undefined=strict_undefined, custom_filters=custom_filters)

