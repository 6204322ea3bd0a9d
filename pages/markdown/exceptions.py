"""Errors raised inside the markdown rendering pipeline."""


class MarkdownRenderError(Exception):
    """Base class for rendering pipeline errors."""


class HighlightError(MarkdownRenderError):
    """
    Tokenizing or formatting a code fragment failed.

    Raised by the highlighter for any internal lexer/formatter failure.
    Callers recover by rendering the fragment as escaped plain text.
    """

    def __init__(self, language, cause):
        self.language = language
        self.cause = cause
        super().__init__(f"Could not highlight {language or 'untagged'} code: {cause}")
