"""
Tests for the employees JSON codec.
"""

import json

import pytest
from pydantic import ValidationError

from adapters.employee_codec import employees_to_payload, parse_employee_response, serialize_employees
from core.domain.errors import ResponseFailure
from core.domain.models import Employee


def test_serialize_then_parse_keeps_order(employees):
    assert parse_employee_response(serialize_employees(employees)) == employees


def test_serialized_shape(employees):
    payload = json.loads(serialize_employees(employees[:1]))

    assert payload == {"employees": [{"name": "Ada Lovelace", "profile": "Android Developer"}]}
    assert employees_to_payload([]) == {"employees": []}


def test_non_ascii_is_kept():
    text = serialize_employees([Employee(name="José Núñez", profile="Diseñador")])

    assert "José Núñez" in text
    assert parse_employee_response(text.encode("utf-8"))[0].name == "José Núñez"


@pytest.mark.parametrize("raw", ["", "null", "{}", '{"employees": null}', '{"employees": [1]}'])
def test_invalid_payloads(raw):
    with pytest.raises(ResponseFailure):
        parse_employee_response(raw)


def test_employee_is_immutable_value():
    employee = Employee(name="Ada", profile="Dev")

    assert employee == Employee(name="Ada", profile="Dev")
    with pytest.raises(ValidationError):
        employee.name = "Grace"
