# pylp:header:start
#
#   project      : pylp
#   file         : fragments.py
#   file_relpath : src/pylp/pipeline/fragments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Compile user code fragments into stage callables.

Each fragment becomes the body of a generated function whose parameter list
is fixed by its role:

=========  ===================  ==============================
Role       Signature            Notes
=========  ===================  ==============================
BEGIN      ``(S)``              return value ignored
LINE       ``(_, S, i)``        implicit trailing ``return _``
END        ``(S, c)``           return value ignored
=========  ===================  ==============================

``_`` is the current line value, ``S`` the shared store, ``i`` the 0-based
line index and ``c`` the number of processed lines. Every fragment of a
pipeline shares one globals namespace that also exposes the ``p`` (print to
STDOUT) and ``e`` (print to STDERR) helpers.

Compilation is eager: syntax errors surface as `FragmentCompileError` when
the fragment is registered, never on first invocation.
"""

from __future__ import annotations

import ast
import sys
import textwrap
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from pylp.config.logging import get_logger
from pylp.constants import (
    COUNT_NAME,
    ERROR_HELPER_NAME,
    FRAGMENT_FUNC_NAME,
    INDEX_NAME,
    PRINT_HELPER_NAME,
    STORE_NAME,
    VALUE_NAME,
)
from pylp.pipeline.errors import FragmentCompileError
from pylp.pipeline.rewrite import expand_bang_shorthand

if TYPE_CHECKING:
    from collections.abc import Callable

    from pylp.config.logging import PylpLogger

logger: PylpLogger = get_logger(__name__)

class Role(Enum):
    """Lifecycle role of a fragment."""

    BEGIN = "begin"
    LINE = "line"
    END = "end"

    @property
    def params(self) -> tuple[str, ...]:
        """Parameter names of the generated function for this role."""
        if self is Role.BEGIN:
            return (STORE_NAME,)
        if self is Role.LINE:
            return (VALUE_NAME, STORE_NAME, INDEX_NAME)
        return (STORE_NAME, COUNT_NAME)

    def label(self, ordinal: int | None = None) -> str:
        """Human-facing name of a fragment in this role (e.g. ``line code #2``)."""
        if self is Role.LINE and ordinal is not None:
            return f"line code #{ordinal}"
        return f"{self.value} code"


@dataclass(frozen=True)
class CodeFragment:
    """A compiled fragment.

    Attributes:
        role (Role): Lifecycle role.
        text (str): Fragment text after trimming and rewrites.
        ordinal (int | None): 1-based declaration position (per-line fragments only).
        fn (Callable[..., Any]): Compiled callable with the role's signature.
    """

    role: Role
    text: str
    ordinal: int | None
    fn: Callable[..., Any]

    @property
    def label(self) -> str:
        """Human-facing name used in traces and error reports."""
        return self.role.label(self.ordinal)

    def __call__(self, *args: Any) -> Any:
        return self.fn(*args)


def _print_helper(*args: object) -> None:
    print(*args, file=sys.stdout, flush=True)


def _error_helper(*args: object) -> None:
    print(*args, file=sys.stderr, flush=True)


def make_namespace() -> dict[str, Any]:
    """Return a fresh globals namespace shared by the fragments of one pipeline."""
    return {
        "__name__": "__pylp__",
        "__builtins__": __builtins__,
        PRINT_HELPER_NAME: _print_helper,
        ERROR_HELPER_NAME: _error_helper,
    }


def _wrap(role: Role, body: ast.Module) -> ast.Module:
    """Return a module defining the role's function around the parsed ``body``.

    The user's statements are moved into the function node as parsed, so
    literals and line numbers are those of the fragment text.
    """
    header: str = f"def {FRAGMENT_FUNC_NAME}({', '.join(role.params)}):\n    pass\n"
    module: ast.Module = ast.parse(header)
    func = cast("ast.FunctionDef", module.body[0])
    statements: list[ast.stmt] = list(body.body)
    if role is Role.LINE:
        statements.append(ast.Return(value=ast.Name(id=VALUE_NAME, ctx=ast.Load())))
    # A fragment holding only comments parses to an empty body.
    func.body = statements or [ast.Pass()]
    return ast.fix_missing_locations(module)


def _syntax_message(exc: SyntaxError) -> str:
    if exc.lineno is None:
        return exc.msg
    return f"{exc.msg} (line {exc.lineno})"


def compile_fragment(
    text: str,
    role: Role,
    *,
    ordinal: int | None = None,
    namespace: dict[str, Any] | None = None,
) -> CodeFragment | None:
    """Compile one fragment.

    Args:
        text (str): Raw fragment source.
        role (Role): Lifecycle role; selects the parameter list.
        ordinal (int | None): 1-based position for per-line fragments.
        namespace (dict[str, Any] | None): Globals shared with sibling fragments.
            A fresh namespace is created when None.

    Returns:
        CodeFragment | None: The compiled fragment, or None when ``text`` is
        blank (blank fragments are not registered).

    Raises:
        FragmentCompileError: If the (rewritten) text is not valid Python.
    """
    value: str = textwrap.dedent(text).strip()
    if not value:
        logger.debug("Skipping empty %s", role.label(ordinal))
        return None
    if role is Role.LINE:
        value = expand_bang_shorthand(value)

    filename: str = f"<pylp:{role.label(ordinal)}>"
    try:
        module: ast.Module = _wrap(role, ast.parse(value, filename, "exec"))
        code = compile(module, filename, "exec")
    except SyntaxError as exc:
        raise FragmentCompileError(role, ordinal, value, _syntax_message(exc)) from exc
    except ValueError as exc:
        raise FragmentCompileError(role, ordinal, value, str(exc)) from exc

    scope: dict[str, Any] = {}
    exec(code, make_namespace() if namespace is None else namespace, scope)
    logger.trace("Compiled %s:\n%s", role.label(ordinal), ast.unparse(module))
    return CodeFragment(role=role, text=value, ordinal=ordinal, fn=scope[FRAGMENT_FUNC_NAME])
