"""Post-processing of generated declarations.

Appends companion types (component props, API response, hook result, store
state) named with the configured affixes, then applies the declaration style.
"""

from __future__ import annotations

import re

from core.project_config import DeclarationStyle, NamingConfig, OutputConfig

_INTERFACE_HEADER_RE = re.compile(
    r"\binterface\s+(?P<name>[A-Za-z_$][\w$]*)(?P<generics>\s*<[^{};]*?>)?\s*\{"
)


def base_type_name(name: str) -> str:
    """PascalCase type name for a document name (`user-profile` → `UserProfile`)."""

    parts = [p for p in re.split(r"[^0-9A-Za-z]+", name) if p]
    if not parts:
        return "Root"
    pascal = "".join(p[0].upper() + p[1:] for p in parts)
    if pascal[0].isdigit():
        pascal = f"T{pascal}"
    return pascal


def build_props_type(name: str, naming: NamingConfig) -> str:
    base = base_type_name(name)
    props_name = f"{naming.props_prefix}{base}{naming.props_suffix}"
    return (
        f"export interface {props_name} {{\n"
        f"  data?: {base};\n"
        f"  loading?: boolean;\n"
        f"  error?: Error;\n"
        f"  onUpdate?: (data: {base}) => void;\n"
        f"}}"
    )


def build_response_type(name: str, naming: NamingConfig) -> str:
    base = base_type_name(name)
    response_name = f"{naming.response_prefix}{base}{naming.response_suffix}"
    return (
        f"export interface {response_name} {{\n"
        f"  code: number;\n"
        f"  message: string;\n"
        f"  data: {base};\n"
        f"}}"
    )


def build_hook_result_type(name: str, naming: NamingConfig) -> str:
    base = base_type_name(name)
    hook_name = f"{naming.hook_prefix}{base}{naming.hook_suffix}"
    return (
        f"export interface {hook_name} {{\n"
        f"  data?: {base};\n"
        f"  loading: boolean;\n"
        f"  error?: Error;\n"
        f"  refetch: () => Promise<void>;\n"
        f"}}"
    )


def build_store_type(name: str, naming: NamingConfig) -> str:
    base = base_type_name(name)
    store_name = f"{naming.store_prefix}{base}{naming.store_suffix}"
    return (
        f"export interface {store_name} {{\n"
        f"  items: {base}[];\n"
        f"  selected?: {base};\n"
        f"  loading: boolean;\n"
        f"  error?: Error;\n"
        f"}}"
    )


def apply_style(text: str, style: DeclarationStyle) -> str:
    """Rewrite `interface X {` headers as `type X = {` when style is `type`."""

    if style is not DeclarationStyle.TYPE:
        return text
    return _INTERFACE_HEADER_RE.sub(
        lambda m: f"type {m.group('name')}{m.group('generics') or ''} = {{",
        text,
    )


def augment_declarations(text: str, name: str, output: OutputConfig) -> str:
    """Append the enabled companion types and apply the configured style."""

    features = output.features
    blocks = [text.rstrip("\n")]
    if features.component_props:
        blocks.append(build_props_type(name, output.naming))
    if features.api_response:
        blocks.append(build_response_type(name, output.naming))
    if features.hook_return_types:
        blocks.append(build_hook_result_type(name, output.naming))
    if features.store_types:
        blocks.append(build_store_type(name, output.naming))
    return apply_style("\n\n".join(blocks), output.style) + "\n"
