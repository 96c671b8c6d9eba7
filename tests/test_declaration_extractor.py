"""
Tests for the declaration extractor.
"""
import pytest

from core.domain.models import BodyScanMode, DocumentModel, FieldDescriptor
from core.services.declaration_extractor import extract_declarations


class TestEndToEndScenario:
    def test_single_line_interface(self):
        model = extract_declarations(
            "interface User { id: number; name: string; email?: string; }"
        )

        assert model.type_names == ["User"]
        assert model.types["User"].fields == (
            FieldDescriptor(name="id", optional=False, type_expression="number"),
            FieldDescriptor(name="name", optional=False, type_expression="string"),
            FieldDescriptor(name="email", optional=True, type_expression="string"),
        )

    def test_quicktype_layout(self, user_declarations):
        model = extract_declarations(user_declarations)

        user = model.types["User"]
        assert [f.name for f in user.fields] == ["id", "name", "email"]
        assert [f.type_expression for f in user.fields] == ["number", "string", "string"]


class TestProperties:
    def test_idempotent(self, shop_declarations):
        assert extract_declarations(shop_declarations) == extract_declarations(shop_declarations)

    def test_declaration_order_preserved(self):
        text = (
            "export interface C { a: A; }\n"
            "export interface A { b: string; }\n"
            "export interface B { c: number; }\n"
        )
        assert extract_declarations(text).type_names == ["C", "A", "B"]

    def test_field_order_preserved(self, shop_declarations):
        order = extract_declarations(shop_declarations).types["Order"]
        assert [f.name for f in order.fields] == ["id", "customer", "items", "placedAt", "paid"]

    @pytest.mark.parametrize(
        "line, optional",
        [
            ("nickname?: string;", True),
            ("nickname ?: string;", False),
            ("nickname: string;", False),
            ("nickname?:string", True),
        ],
    )
    def test_optional_marker(self, line, optional):
        model = extract_declarations(f"interface Profile {{\n  {line}\n}}")
        fields = model.types["Profile"].fields
        if line.startswith("nickname ?"):
            # `?` separated from the name is not a field line.
            assert fields == ()
        else:
            assert fields[0].optional is optional

    def test_empty_input(self):
        model = extract_declarations("")
        assert model == DocumentModel()
        assert model.is_empty

    def test_text_without_headers(self):
        assert extract_declarations("const x = { a: 1 };\n// interface\n").is_empty

    def test_malformed_text_does_not_raise(self):
        model = extract_declarations("interface { : ; }}}{{ type = ; enum\n")
        assert isinstance(model, DocumentModel)


class TestDeclarationKinds:
    def test_type_alias_object(self):
        model = extract_declarations("export type User = {\n    id: number;\n};\n")
        assert [f.name for f in model.types["User"].fields] == ["id"]

    def test_alias_without_fields_is_retained(self):
        model = extract_declarations('export type Status = "active" | "inactive";\n')
        assert model.type_names == ["Status"]
        assert model.types["Status"].fields == ()

    def test_enum_is_retained_without_fields(self):
        text = 'export enum Role {\n    Admin = "admin",\n    Guest = "guest",\n}\n'
        model = extract_declarations(text)
        assert model.type_names == ["Role"]
        assert model.types["Role"].fields == ()

    def test_generics_and_extends(self):
        text = "export interface Page<T> extends Base {\n    items: T[];\n    total: number;\n}\n"
        page = extract_declarations(text).types["Page"]
        assert [(f.name, f.type_expression) for f in page.fields] == [("items", "T[]"), ("total", "number")]

    def test_readonly_members(self):
        model = extract_declarations("interface Point {\n  readonly x: number;\n  readonly y?: number;\n}")
        assert [(f.name, f.optional) for f in model.types["Point"].fields] == [("x", False), ("y", True)]

    def test_comments_and_methods_ignored(self):
        text = (
            "export interface Service {\n"
            "    /** Service identifier */\n"
            "    id: string;\n"
            "    // legacy\n"
            "    refresh(): void;\n"
            "    onChange?: (value: string) => void;\n"
            "}\n"
        )
        fields = extract_declarations(text).types["Service"].fields
        assert [(f.name, f.type_expression) for f in fields] == [
            ("id", "string"),
            ("onChange", "(value: string) => void"),
        ]

    def test_trailing_comma_dropped(self):
        fields = extract_declarations("interface A {\n  b: string,\n  c: number,\n}").types["A"].fields
        assert [f.type_expression for f in fields] == ["string", "number"]

    def test_redeclaration_keeps_first_position(self):
        text = "interface A { x: string; }\ninterface B { y: string; }\ninterface A { z: number; }\n"
        model = extract_declarations(text)
        assert model.type_names == ["A", "B"]
        assert [f.name for f in model.types["A"].fields] == ["z"]


NESTED = """\
export interface Order {
    id: number;
    address: {
        street: string;
    };
    total: number;
}

export interface Invoice {
    orderId: number;
}
"""


class TestBodyScanModes:
    def test_nearest_stops_at_first_closing_brace(self):
        order = extract_declarations(NESTED).types["Order"]

        assert [f.name for f in order.fields] == ["id", "address", "street"]
        assert order.fields[1].type_expression == "{"

    def test_nearest_keeps_following_declarations(self):
        model = extract_declarations(NESTED)
        assert model.type_names == ["Order", "Invoice"]
        assert [f.name for f in model.types["Invoice"].fields] == ["orderId"]

    def test_balanced_keeps_nested_block_in_one_field(self):
        model = extract_declarations(NESTED, body_scan=BodyScanMode.BALANCED)
        order = model.types["Order"]

        assert [f.name for f in order.fields] == ["id", "address", "total"]
        assert order.fields[1].type_expression == "{ street: string; }"
        assert [f.name for f in model.types["Invoice"].fields] == ["orderId"]

    def test_balanced_alias_ends_at_semicolon(self):
        text = "export type Id = string;\nexport interface User { id: Id; }\n"
        model = extract_declarations(text, body_scan=BodyScanMode.BALANCED)
        assert model.type_names == ["Id", "User"]
        assert model.types["Id"].fields == ()
        assert model.types["User"].fields[0].type_expression == "Id"

    def test_balanced_unclosed_body_runs_to_end(self):
        model = extract_declarations("interface A {\n  b: string;\n", body_scan=BodyScanMode.BALANCED)
        assert [f.name for f in model.types["A"].fields] == ["b"]

    def test_modes_agree_on_flat_declarations(self, shop_declarations):
        assert extract_declarations(shop_declarations) == extract_declarations(
            shop_declarations, body_scan=BodyScanMode.BALANCED
        )
