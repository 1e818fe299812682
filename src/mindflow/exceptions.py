"""Exception hierarchy for mindflow."""


class MindflowError(Exception):
    """Base exception for all mindflow errors."""


class ConfigurationError(MindflowError):
    """Raised when a rule table cannot be built; detected at pipeline construction."""


class LexiconConfigError(ConfigurationError):
    """Raised when a lexicon entry is malformed or its pattern cannot be compiled."""


class RuleTableError(ConfigurationError):
    """Raised when the section rule table is incomplete or inconsistent."""


class CompletionError(MindflowError):
    """Raised when the external completion collaborator fails after exhausting attempts."""


class NoteFormatError(MindflowError):
    """Completion output is missing a section heading or leaves a section empty."""

    def __init__(self, message: str, missing_sections: list[str] | None = None, raw_text: str = "") -> None:
        super().__init__(message)
        self.missing_sections = missing_sections or []
        self.raw_text = raw_text
