"""Binding renderers.

A binding is a source file exporting one named, immutable constant whose
value is a literal copy of an ABI array. The binding language is picked
from the output file suffix:

- ``.ts``: ``export const Name = [...] as const;`` with identifier-like
  object keys left unquoted. Layout matches ``JSON.stringify(abi, null, 2)``.
- ``.py``: a module assigning ``Name: Final[...] = [...]``.

Values are re-encoded, never reinterpreted: keys, strings and nesting are
emitted exactly as they appear in the artifact.
"""

from __future__ import annotations

import json
import keyword
import math
import re
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import PurePath
from typing import Any

from abi_bindgen.errors import BindingNameError

# Keys matching this are written without quotes in TypeScript object literals
BARE_KEY_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

TS_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

TS_RESERVED_WORDS = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger",
        "default", "delete", "do", "else", "enum", "export", "extends", "false",
        "finally", "for", "function", "if", "import", "in", "instanceof", "new",
        "null", "return", "super", "switch", "this", "throw", "true", "try",
        "typeof", "var", "void", "while", "with",
    }
)  # fmt: skip


def js_number(value: float) -> str:
    """Format a float the way JavaScript's ``Number#toString`` does.

    Uses the shortest round-tripping digits (same as ``repr``), drops the
    fraction of integral values and switches to exponent notation when
    ``|value| < 1e-6`` or ``|value| >= 1e21``.

    Example:
        >>> js_number(1.0), js_number(1e-07), js_number(1e21)
        ('1', '1e-7', '1e+21')
    """
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    parts = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    k = len(digits)
    n = int(parts.exponent) + k  # position of the decimal point

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    exponent = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


class BindingRenderer(ABC):
    """Base class for binding languages.

    Subclasses render a complete binding file for one constant.

    Attributes:
        suffix: Output file suffix handled by this renderer.
        language: Human-readable language name.
    """

    suffix: str = ""
    language: str = ""

    @abstractmethod
    def is_valid_name(self, name: str) -> bool:
        """Return True if ``name`` can be used as the constant name."""

    @abstractmethod
    def render_value(self, value: Any) -> str:
        """Render an ABI value as a source literal."""

    @abstractmethod
    def render_module(self, name: str, abi: list[Any]) -> str:
        """Render the full binding file text, trailing newline included."""


class TypeScriptRenderer(BindingRenderer):
    """Renders ``export const Name = [...] as const;`` bindings.

    Example:
        >>> TypeScriptRenderer().render_module("FooAbi", [{"type": "function"}])
        'export const FooAbi = [\\n  {\\n    type: "function"\\n  }\\n] as const;\\n'
    """

    suffix = ".ts"
    language = "TypeScript"
    indent = "  "

    def is_valid_name(self, name: str) -> bool:
        return bool(TS_IDENTIFIER_PATTERN.match(name)) and name not in TS_RESERVED_WORDS

    def render_value(self, value: Any) -> str:
        return self._render(value, 0)

    def render_module(self, name: str, abi: list[Any]) -> str:
        return f"export const {name} = {self.render_value(abi)} as const;\n"

    def _render(self, value: Any, level: int) -> str:
        inner = self.indent * (level + 1)
        if isinstance(value, list):
            if not value:
                return "[]"
            items = [inner + self._render(item, level + 1) for item in value]
            return "[\n" + ",\n".join(items) + "\n" + self.indent * level + "]"
        if isinstance(value, dict):
            if not value:
                return "{}"
            members = [
                f"{inner}{self._render_key(str(key))}: {self._render(item, level + 1)}"
                for key, item in value.items()
            ]
            return "{\n" + ",\n".join(members) + "\n" + self.indent * level + "}"
        if isinstance(value, float):
            return js_number(value)
        return json.dumps(value, ensure_ascii=False)

    @staticmethod
    def _render_key(key: str) -> str:
        if BARE_KEY_PATTERN.match(key):
            return key
        return json.dumps(key, ensure_ascii=False)


class PythonRenderer(BindingRenderer):
    """Renders ``Name: Final[list[dict[str, Any]]] = [...]`` modules.

    Output uses 4-space indentation with trailing commas, so the module is
    stable under black.
    """

    suffix = ".py"
    language = "Python"
    indent = "    "

    header = '"""ABI binding generated by abi-bindgen. Do not edit."""\n'

    def is_valid_name(self, name: str) -> bool:
        return name.isidentifier() and not keyword.iskeyword(name)

    def render_value(self, value: Any) -> str:
        return self._render(value, 0)

    def render_module(self, name: str, abi: list[Any]) -> str:
        return (
            f"{self.header}\n"
            "from __future__ import annotations\n\n"
            "from typing import Any, Final\n\n"
            f"{name}: Final[list[dict[str, Any]]] = {self.render_value(abi)}\n"
        )

    def _render(self, value: Any, level: int) -> str:
        inner = self.indent * (level + 1)
        if isinstance(value, list):
            if not value:
                return "[]"
            items = "".join(f"{inner}{self._render(item, level + 1)},\n" for item in value)
            return "[\n" + items + self.indent * level + "]"
        if isinstance(value, dict):
            if not value:
                return "{}"
            members = "".join(
                f"{inner}{json.dumps(str(key), ensure_ascii=False)}: "
                f"{self._render(item, level + 1)},\n"
                for key, item in value.items()
            )
            return "{\n" + members + self.indent * level + "}"
        if value is None:
            return "None"
        if isinstance(value, bool):
            return "True" if value else "False"
        return json.dumps(value, ensure_ascii=False)


RENDERERS: dict[str, BindingRenderer] = {
    renderer.suffix: renderer for renderer in (TypeScriptRenderer(), PythonRenderer())
}


def get_renderer(output_name: str) -> BindingRenderer:
    """Pick the renderer for an output file name.

    Raises:
        BindingNameError: If the suffix is not a supported binding language.
    """
    suffix = PurePath(output_name).suffix
    renderer = RENDERERS.get(suffix)
    if renderer is None:
        supported = ", ".join(sorted(RENDERERS))
        raise BindingNameError(
            output_name,
            f"unsupported suffix '{suffix or '(none)'}' (supported: {supported})",
        )
    return renderer


def constant_name(output_name: str) -> str:
    """Derive the exported constant name from an output file name.

    ``TokenFactoryAbi.ts`` becomes ``TokenFactoryAbi``.

    Raises:
        BindingNameError: If the output name has directory parts, an
            unsupported suffix, or a stem that is not a valid identifier.
    """
    pure = PurePath(output_name)
    if pure.name != output_name:
        raise BindingNameError(output_name, "output name must be a bare file name")

    renderer = get_renderer(output_name)
    name = pure.stem
    if not renderer.is_valid_name(name):
        raise BindingNameError(
            output_name,
            f"'{name}' is not a valid {renderer.language} identifier",
        )
    return name


def render_binding(output_name: str, abi: list[Any]) -> str:
    """Render the binding file text for ``output_name``.

    Args:
        output_name: Binding file name; its suffix selects the language and
            its stem becomes the constant name.
        abi: Interface-description array.

    Returns:
        Complete file contents.

    Example:
        >>> render_binding("FooAbi.ts", [])
        'export const FooAbi = [] as const;\\n'
    """
    name = constant_name(output_name)
    return get_renderer(output_name).render_module(name, abi)
