"""Classify text as Latin-script (phonetic) input or native-script input."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from models.language_models import ScriptDetection
from models.re_models import LATIN_LETTER_PATTERN, SCRIPT_BLOCK_PATTERNS
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["ScriptClassifier"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ScriptClassifier:
    """Heuristic script classifier.

    Only letters and combining marks are considered: whitespace, digits, punctuation and symbols
    are ignored. The result is a guess; mixed-script text is classified by its majority for
    `is_latin_text` and by the first matching Unicode block for `detect_script`.

    Attributes:
        LATIN_THRESHOLD (ClassVar[float]): Share of Latin letters above which text counts as Latin.
    """

    LATIN_THRESHOLD: ClassVar[float] = 0.7

    @classmethod
    def latin_ratio(cls, text: str) -> float:
        """Return the share of Latin-block letters in the text, 1.0 when it has no letters."""
        letters: str = StringUtils.letters_only(text)
        if not letters:
            return 1.0
        latin_count: int = len(LATIN_LETTER_PATTERN.findall(letters))
        return latin_count / len(letters)

    @classmethod
    def is_latin_text(cls, text: str) -> bool:
        """Check whether the text is primarily written in Latin script.

        Args:
            text (str): Text to classify.

        Returns:
            bool: True if more than 70% of its letters are Latin, or if it has no letters.
        """
        letters: str = StringUtils.letters_only(text)
        if not letters:
            return True
        return cls.latin_ratio(letters) > cls.LATIN_THRESHOLD

    @classmethod
    def detect_script(cls, text: str) -> ScriptDetection:
        """Guess the script and the most probable language of a text.

        The first Unicode block with any match wins. Confidence is the share of letters in that
        block. Text without a match in any known block is reported as Latin/English with its
        Latin letter share as confidence.

        Args:
            text (str): Text to classify.

        Returns:
            ScriptDetection: Detected script, language, Latin flag and confidence.
        """
        letters: str = StringUtils.letters_only(text)
        for pattern, script, language in SCRIPT_BLOCK_PATTERNS:
            matches: list[str] = pattern.findall(letters)
            if matches:
                confidence: float = min(len(matches) / len(letters), 1.0)
                logger.debug("detected script '%s' (confidence %.2f)", script, confidence)
                return ScriptDetection(script=script, language=language, is_latin=False, confidence=confidence)

        return ScriptDetection(script="Latin", language="english", is_latin=True, confidence=cls.latin_ratio(letters))
