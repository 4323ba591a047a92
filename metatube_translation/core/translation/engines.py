"""
Translation engine and translation mode definitions.
"""

from enum import Enum, Flag


class TranslationEngine(Enum):
    """Translation engines supported by the MetaTube server.

    The value is the engine name sent to the server.
    """
    BAIDU = "Baidu"
    GOOGLE = "Google"
    GOOGLE_FREE = "GoogleFree"
    DEEPL = "DeepL"
    OPENAI = "OpenAi"

    @classmethod
    def from_name(cls, name: str) -> "TranslationEngine":
        """Look up an engine by value or member name, case-insensitively."""
        normalized = name.strip().lower().replace("-", "_")
        for engine in cls:
            if normalized in (engine.value.lower(), engine.name.lower()):
                return engine
        raise ValueError(f"Unknown translation engine: {name}")


class TranslationMode(Flag):
    """Optional movie fields that are translated when their flag is set."""
    NONE = 0
    TITLE = 1
    SUMMARY = 2
    BOTH = TITLE | SUMMARY

    @classmethod
    def parse(cls, value: str) -> "TranslationMode":
        """
        Parse a comma or pipe separated list of flag names.

        Examples:
            "title" -> TITLE
            "title,summary" -> BOTH
            "" or "none" -> NONE
        """
        mode = cls.NONE
        for part in value.replace("|", ",").split(","):
            part = part.strip().upper()
            if not part:
                continue
            try:
                mode |= cls[part]
            except KeyError:
                raise ValueError(f"Unknown translation mode: {part.lower()}") from None
        return mode
