"""🔧 Function Markdown - Signature and argument sections for provider functions."""

from __future__ import annotations

from ..errors import SchemaRenderError
from ..schema.models import FunctionParameter, FunctionSignature, friendly_type_name, type_label


def render_signature(name: str, signature: FunctionSignature) -> str:
    """Render the call signature as a fenced ``text`` block.

    Example:
        ```text
        parse_id(id string, ...parts string) object
        ```
    """
    if not name:
        raise SchemaRenderError("function name is empty")

    params = [f"{p.name} {friendly_type_name(p.type)}" for p in signature.parameters]
    if signature.variadic_parameter is not None:
        variadic = signature.variadic_parameter
        params.append(f"...{variadic.name} {friendly_type_name(variadic.type)}")

    return_type = friendly_type_name(signature.return_type)
    return f"```text\n{name}({', '.join(params)}) {return_type}\n```"


def render_arguments(signature: FunctionSignature) -> str:
    """Render positional parameters as a numbered list.

    Returns "" for a function without parameters.
    """
    lines = [
        _argument_line(position, param, variadic=False)
        for position, param in enumerate(signature.parameters, start=1)
    ]
    return "\n".join(lines)


def render_variadic_argument(signature: FunctionSignature) -> str:
    """Render the variadic parameter, numbered after the positional ones.

    Returns "" when the function has no variadic parameter.
    """
    if signature.variadic_parameter is None:
        return ""
    position = len(signature.parameters) + 1
    return _argument_line(position, signature.variadic_parameter, variadic=True)


def _argument_line(position: int, param: FunctionParameter, variadic: bool) -> str:
    if not param.name:
        raise SchemaRenderError(f"parameter {position} has no name")

    label = type_label(param.type)
    if variadic:
        label = f"Variadic, {label}"
    if param.is_nullable:
        label += ", Nullable"

    line = f"{position}. `{param.name}` ({label})"
    description = param.description.strip()
    if description:
        line += f" {description}"
    return line
