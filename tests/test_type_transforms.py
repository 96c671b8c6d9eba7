"""
Tests for declaration post-processing (companion types and style).
"""
import pytest

from core.project_config import DeclarationStyle, NamingConfig, OutputConfig, OutputFeatures
from core.services.declaration_extractor import extract_declarations
from core.services.type_graph import build_type_graph
from core.services.type_transforms import (
    apply_style,
    augment_declarations,
    base_type_name,
    build_hook_result_type,
    build_props_type,
    build_response_type,
    build_store_type,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("user", "User"),
        ("user-profile", "UserProfile"),
        ("order_items.v2", "OrderItemsV2"),
        ("123abc", "T123abc"),
        ("---", "Root"),
    ],
)
def test_base_type_name(name, expected):
    assert base_type_name(name) == expected


def test_props_type():
    assert build_props_type("user", NamingConfig()) == (
        "export interface UserProps {\n"
        "  data?: User;\n"
        "  loading?: boolean;\n"
        "  error?: Error;\n"
        "  onUpdate?: (data: User) => void;\n"
        "}"
    )


def test_response_type():
    assert build_response_type("user", NamingConfig()) == (
        "export interface UserResponse {\n"
        "  code: number;\n"
        "  message: string;\n"
        "  data: User;\n"
        "}"
    )


def test_naming_affixes():
    naming = NamingConfig(
        props_prefix="I",
        props_suffix="Properties",
        response_prefix="Api",
        response_suffix="Reply",
        hook_prefix="",
        hook_suffix="Query",
        store_prefix="Store",
        store_suffix="",
    )

    assert build_props_type("user", naming).startswith("export interface IUserProperties {")
    assert build_response_type("user", naming).startswith("export interface ApiUserReply {")
    assert build_hook_result_type("user", naming).startswith("export interface UserQuery {")
    assert build_store_type("user", naming).startswith("export interface StoreUser {")


def test_apply_style_type():
    text = "export interface User {\n  id: number;\n}\n\nexport interface Page<T> {\n  items: T[];\n}\n"

    assert apply_style(text, DeclarationStyle.TYPE) == (
        "export type User = {\n  id: number;\n}\n\nexport type Page<T> = {\n  items: T[];\n}\n"
    )


def test_apply_style_interface_is_unchanged(user_declarations):
    assert apply_style(user_declarations, DeclarationStyle.INTERFACE) == user_declarations


def test_augment_with_defaults(user_declarations):
    augmented = augment_declarations(user_declarations, "user", OutputConfig(dir="out"))
    model = extract_declarations(augmented)

    assert model.type_names == ["User", "UserProps", "UserResponse", "UseUserResult"]
    assert augmented.endswith("}\n")


def test_augment_all_features_and_type_style(user_declarations):
    output = OutputConfig(
        dir="out",
        style=DeclarationStyle.TYPE,
        features=OutputFeatures(store_types=True),
    )
    augmented = augment_declarations(user_declarations, "user", output)

    assert "interface" not in augmented
    assert "export type UserState = {" in augmented
    assert extract_declarations(augmented).type_names == [
        "User",
        "UserProps",
        "UserResponse",
        "UseUserResult",
        "UserState",
    ]


def test_augment_without_companions(user_declarations):
    output = OutputConfig(
        dir="out",
        features=OutputFeatures(component_props=False, api_response=False, hook_return_types=False),
    )
    assert augment_declarations(user_declarations, "user", output) == user_declarations


def test_companions_reference_base_type(user_declarations):
    augmented = augment_declarations(user_declarations, "user", OutputConfig(dir="out"))
    edges = [(e.source, e.target) for e in build_type_graph(extract_declarations(augmented)).edges]

    assert ("UserProps", "User") in edges
    assert ("UserResponse", "User") in edges
    assert ("UseUserResult", "User") in edges
