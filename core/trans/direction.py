"""Classification of a translation request by the scripts and English-ness of its languages."""

from __future__ import annotations

from models.translation_models import BRIDGED_DIRECTIONS, TranslationDirection

__all__: list[str] = ["needs_bridge", "resolve_direction"]


def resolve_direction(
    *,
    source_is_latin: bool,
    target_is_latin: bool,
    source_is_english: bool,
    target_is_english: bool,
    same_language: bool,
) -> TranslationDirection:
    """Resolve the translation direction of a language pair.

    Rules are applied in order and the first that applies wins: same language, English source,
    English target, both Latin, Latin source, Latin target, otherwise native to native.

    Args:
        source_is_latin (bool): The source language is written in Latin script.
        target_is_latin (bool): The target language is written in Latin script.
        source_is_english (bool): The source language is English.
        target_is_english (bool): The target language is English.
        same_language (bool): Both sides normalize to the same language.

    Returns:
        TranslationDirection: The resolved direction.
    """
    if same_language:
        return TranslationDirection.PASSTHROUGH
    if source_is_english:
        return TranslationDirection.ENGLISH_SOURCE
    if target_is_english:
        return TranslationDirection.ENGLISH_TARGET
    if source_is_latin and target_is_latin:
        return TranslationDirection.LATIN_TO_LATIN
    if source_is_latin:
        return TranslationDirection.LATIN_TO_NATIVE
    if target_is_latin:
        return TranslationDirection.NATIVE_TO_LATIN
    return TranslationDirection.NATIVE_TO_NATIVE


def needs_bridge(direction: TranslationDirection) -> bool:
    """Check whether a direction is translated through an English pivot."""
    return direction in BRIDGED_DIRECTIONS
