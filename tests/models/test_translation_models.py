from __future__ import annotations

import json

from models.translation_models import (
    ChatMessageView,
    LanguageProfile,
    ScriptType,
    TranslationDirection,
    TranslationMethod,
    TranslationResult,
)


def test_confidence_is_clamped() -> None:
    high = TranslationResult(text="a", original_text="a", source_language="x", target_language="y", confidence=1.5)
    low = TranslationResult(text="a", original_text="a", source_language="x", target_language="y", confidence=-0.2)

    assert high.confidence == 1.0
    assert low.confidence == 0.0


def test_tagged_returns_copy() -> None:
    result = TranslationResult(
        text="नमस्ते",
        original_text="hello",
        source_language="english",
        target_language="hindi",
        method=TranslationMethod.PHRASE_LOOKUP,
    )

    cached: TranslationResult = result.tagged(TranslationMethod.CACHED)

    assert cached.method == TranslationMethod.CACHED
    assert result.method == TranslationMethod.PHRASE_LOOKUP
    assert cached.text == result.text


def test_result_json_uses_camel_case_and_omits_missing_pivot() -> None:
    result = TranslationResult(
        text="hola",
        original_text="hola",
        source_language="spanish",
        target_language="spanish",
    )

    payload: dict = json.loads(result.to_json())

    assert payload["originalText"] == "hola"
    assert payload["isTranslated"] is False
    assert payload["direction"] == "passthrough"
    assert "englishPivot" not in payload


def test_result_json_keeps_pivot() -> None:
    result = TranslationResult(
        text="agua",
        original_text="पानी",
        source_language="hindi",
        target_language="spanish",
        direction=TranslationDirection.NATIVE_TO_LATIN,
        english_pivot="water",
    )

    assert result.to_dict()["englishPivot"] == "water"


def test_profile_from_json() -> None:
    profile: LanguageProfile = LanguageProfile.from_json('{"motherTongue": "telugu", "scriptType": "native"}')

    assert profile.mother_tongue == "telugu"
    assert profile.script_type == ScriptType.NATIVE
    assert profile.user_id == ""


def test_chat_view_defaults() -> None:
    view = ChatMessageView(
        original_text="hi",
        sender_view="hi",
        receiver_view="hi",
        english_core="hi",
        sender_language="english",
        receiver_language="english",
    )

    assert view.direction == TranslationDirection.PASSTHROUGH
    assert view.was_translated is False
    assert view.was_transliterated is False
