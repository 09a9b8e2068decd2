import pytest

from pyopenai import (
    CompletionRequest,
    CompletionRequestBuilder,
    CreateImageRequest,
    CreateImageRequestBuilder,
    EditRequest,
    EditRequestBuilder,
    ListParam,
    MissingParameterError,
    StringParam,
)


def test_completion_builder_requires_model():
    with pytest.raises(MissingParameterError) as excinfo:
        CompletionRequestBuilder().prompt("hello").build()
    assert excinfo.value.field == "model"
    assert excinfo.value.request_type == "CompletionRequest"


def test_completion_builder_sets_model_only():
    req = CompletionRequestBuilder().model("test").build()
    assert req.model == "test"
    assert req.prompt is None
    assert req.max_tokens is None
    assert req.echo is None
    assert req.to_dict() == {"model": "test"}


def test_completion_prompt_variants():
    assert CompletionRequestBuilder().model("m").prompt("test").build().prompt == StringParam("test")
    listed = CompletionRequestBuilder().model("m").prompt(["a", "b"]).build()
    assert listed.prompt == ListParam(("a", "b"))
    assert listed.to_dict()["prompt"] == ["a", "b"]


def test_completion_builds_with_coercion():
    req = (
        CompletionRequest.builder()
        .model("model")
        .n(100)
        .prompt("prompt")
        .suffix("suffix")
        .best_of(True)
        .echo(1)
        .stream(True)
        .temperature("0.5")
        .stop(["\n", "END"])
        .logit_bias({"50256": -100})
        .build()
    )
    assert req == CompletionRequest(
        model="model",
        prompt=StringParam("prompt"),
        suffix="suffix",
        temperature=0.5,
        n=100,
        stream=True,
        echo=True,
        stop=ListParam(("\n", "END")),
        best_of=1,
        logit_bias={"50256": -100},
    )
    assert req.to_dict() == {
        "model": "model",
        "prompt": "prompt",
        "suffix": "suffix",
        "temperature": 0.5,
        "n": 100,
        "stream": True,
        "echo": True,
        "stop": ["\n", "END"],
        "best_of": 1,
        "logit_bias": {"50256": -100},
    }


def test_edit_builder_requires_model_and_instruction():
    with pytest.raises(MissingParameterError) as excinfo:
        EditRequestBuilder().instruction("instruction").build()
    assert excinfo.value.field == "model"
    with pytest.raises(MissingParameterError) as excinfo:
        EditRequestBuilder().model("model").build()
    assert excinfo.value.field == "instruction"


def test_edit_builder_creates_request():
    request = (
        EditRequestBuilder()
        .model("model")
        .input("input")
        .instruction("instructions")
        .build()
    )
    assert request == EditRequest(model="model", input="input", instruction="instructions")
    assert request.to_dict() == {
        "model": "model",
        "input": "input",
        "instruction": "instructions",
    }


def test_image_builder_requires_prompt():
    with pytest.raises(MissingParameterError) as excinfo:
        CreateImageRequestBuilder().size("256x256").build()
    assert excinfo.value.field == "prompt"
    assert "CreateImageRequest" in str(excinfo.value)


def test_image_builder():
    request = (
        CreateImageRequest.builder()
        .prompt("A cute baby sea otter")
        .size("1024x1024")
        .n("2")
        .build()
    )
    assert request.n == 2
    assert request.response_format is None
    assert request.to_dict() == {"prompt": "A cute baby sea otter", "n": 2, "size": "1024x1024"}


def test_none_leaves_required_field_unset():
    with pytest.raises(MissingParameterError) as excinfo:
        EditRequestBuilder().model(None).instruction("x").build()
    assert excinfo.value.field == "model"
    with pytest.raises(MissingParameterError) as excinfo:
        EditRequestBuilder().model("m").instruction(None).build()
    assert excinfo.value.field == "instruction"
    with pytest.raises(MissingParameterError):
        CompletionRequestBuilder().model(None).build()
    with pytest.raises(MissingParameterError):
        CreateImageRequestBuilder().prompt(None).build()


def test_none_leaves_optional_fields_absent():
    req = (
        CompletionRequestBuilder()
        .model("m")
        .stream(None)
        .echo(None)
        .prompt(None)
        .stop(None)
        .logit_bias(None)
        .build()
    )
    assert req.stream is None
    assert req.echo is None
    assert req.to_dict() == {"model": "m"}


def test_completion_request_is_hashable_with_logit_bias():
    req = CompletionRequestBuilder().model("m").logit_bias({"50256": -100}).build()
    same = CompletionRequestBuilder().model("m").logit_bias({"50256": -100}).build()
    assert hash(req) == hash(same)
    assert req == same
