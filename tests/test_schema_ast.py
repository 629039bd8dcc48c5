# tests/test_schema_ast.py
import jsonschema
import pytest

from monkey.parser import parse_text
from monkey.schema import schema_errors, validate_program


def ast_of(src):
    program, errors = parse_text(src)
    assert errors == []
    return program.to_dict()


def test_parsed_programs_validate():
    validate_program(ast_of("let x = 5; return -x * (2 + 3) == 7; !true"))  # should NOT raise
    validate_program(ast_of(""))


def test_to_dict_shape():
    assert ast_of("let x = -1;") == {
        "type": "Program",
        "statements": [
            {
                "type": "LetStatement",
                "name": {"type": "Identifier", "value": "x"},
                "value": {
                    "type": "PrefixExpression",
                    "operator": "-",
                    "right": {"type": "IntegerLiteral", "value": 1},
                },
            }
        ],
    }


def test_unknown_operator_rejected():
    doc = ast_of("1 + 2")
    doc["statements"][0]["expression"]["operator"] = "%"
    with pytest.raises(jsonschema.ValidationError):
        validate_program(doc)


def test_missing_expression_rejected():
    doc = ast_of("return 1;")
    del doc["statements"][0]["returnValue"]
    with pytest.raises(jsonschema.ValidationError):
        validate_program(doc)


def test_boolean_is_not_an_integer_literal():
    doc = ast_of("5")
    doc["statements"][0]["expression"]["value"] = True
    with pytest.raises(jsonschema.ValidationError):
        validate_program(doc)


def test_schema_errors_lists_messages_with_paths():
    doc = ast_of("1")
    doc["extra"] = 1
    msgs = schema_errors(doc)
    assert msgs and msgs[0].startswith("<root>:")
    assert schema_errors(ast_of("1")) == []
