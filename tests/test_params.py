import json

import pytest

from pyopenai import EncodeDecodeError, ListParam, StringParam
from pyopenai.params import from_json, to_string_or_list


def test_string_roundtrip_has_no_tag():
    param = StringParam("test_string")
    encoded = json.dumps(param.to_json())
    assert encoded == '"test_string"'
    assert from_json(json.loads(encoded)) == param


def test_list_roundtrip_has_no_tag():
    param = ListParam(("test_string", "test_string2"))
    encoded = json.dumps(param.to_json())
    assert encoded == '["test_string", "test_string2"]'
    decoded = from_json(json.loads(encoded))
    assert isinstance(decoded, ListParam)
    assert decoded == param


def test_coercion():
    assert to_string_or_list("a") == StringParam("a")
    assert to_string_or_list(["a", "b"]) == ListParam(("a", "b"))
    assert to_string_or_list(("a",)) == ListParam(("a",))
    existing = StringParam("x")
    assert to_string_or_list(existing) is existing


@pytest.mark.parametrize("value", [1, None, {"a": "b"}, ["a", 2]])
def test_from_json_rejects_other_shapes(value):
    with pytest.raises(EncodeDecodeError):
        from_json(value)
