import pytest

from assistwire.moderation import (
    MODERATION_OMNI_20240926,
    MODERATION_OMNI_LATEST,
    MODERATION_TEXT_001,
    MODERATION_TEXT_LATEST,
    MODERATION_TEXT_STABLE,
    InvalidModerationModelError,
    ModerationRequest,
    ModerationResponse,
    ModerationResult,
    ResultCategories,
    ResultCategoryScores,
    moderation_request,
    validate_moderation_model,
)


def test_moderation_request_build():
    api = moderation_request(
        ModerationRequest(model=MODERATION_TEXT_STABLE, input="I want to kill them.")
    )
    assert api.method == "POST"
    assert api.path == "/moderations"
    assert api.model == "text-moderation-stable"
    assert api.body == {"input": "I want to kill them.", "model": "text-moderation-stable"}


@pytest.mark.parametrize(
    "model",
    [
        MODERATION_TEXT_STABLE,
        MODERATION_TEXT_LATEST,
        MODERATION_OMNI_20240926,
        MODERATION_OMNI_LATEST,
        "",
    ],
)
def test_accepted_models(model):
    api = moderation_request(ModerationRequest(model=model, input="I want to kill them."))
    assert api.body["input"] == "I want to kill them."
    assert api.model == model


@pytest.mark.parametrize("model", ["gpt-3.5-turbo", MODERATION_TEXT_001])
def test_rejected_models(model):
    with pytest.raises(InvalidModerationModelError, match="not supported with moderation"):
        moderation_request(ModerationRequest(model=model, input="I want to kill them."))


def test_validate_rejects_unknown():
    with pytest.raises(InvalidModerationModelError):
        validate_moderation_model("gpt-3.5-turbo")


def test_empty_model_is_left_out_of_body():
    api = moderation_request(ModerationRequest(input="hello"))
    assert api.body == {"input": "hello"}


def test_response_parsing():
    payload = {
        "id": "1700000000",
        "model": "text-moderation-stable",
        "results": [
            {
                "categories": {"violence": True, "hate": False},
                "category_scores": {"violence": 1},
                "flagged": True,
            }
        ],
    }
    response = ModerationResponse.from_dict(payload)
    assert response.id == "1700000000"
    assert response.model == "text-moderation-stable"
    assert len(response.results) == 1
    result = response.results[0]
    assert result.flagged is True
    assert result.categories.violence is True
    assert result.categories.hate is False
    assert result.category_scores.violence == 1.0
    assert result.category_scores.sexual_minors == 0.0


def test_categories_use_wire_keys_and_round_trip():
    categories = ResultCategories(self_harm_intent=True, violence_graphic=True)
    data = categories.to_dict()
    assert data["self-harm/intent"] is True
    assert data["violence/graphic"] is True
    assert data["hate/threatening"] is False
    assert ResultCategories.from_dict(data) == categories


def test_scores_round_trip():
    scores = ResultCategoryScores(harassment_threatening=0.25, sexual_minors=0.5)
    data = scores.to_dict()
    assert data["harassment/threatening"] == 0.25
    assert ResultCategoryScores.from_dict(data) == scores


def test_missing_results_become_empty_list():
    response = ModerationResponse.from_dict({"id": "x", "model": "m", "results": None})
    assert response.results == []
    assert ModerationResult.from_dict({}) == ModerationResult()