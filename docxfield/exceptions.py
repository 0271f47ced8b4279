"""
Custom exception classes for the docxfield converter.
"""


class DocxFieldError(Exception):
    """Base exception for all docxfield errors."""
    pass


class ConversionError(DocxFieldError):
    """Error during HTML-to-WordprocessingML conversion."""
    pass


class UnsupportedElementError(ConversionError):
    """Markup element outside the supported block or inline vocabulary."""

    def __init__(self, element_name, stage):
        self.element_name = element_name
        self.stage = stage
        super().__init__(f"Unsupported {stage} element: <{element_name}>")


class StyleError(DocxFieldError):
    """Error related to run formatting or paragraph styles."""
    pass


class ImageError(DocxFieldError):
    """Error related to image processing or embedding."""
    pass


class SecurityError(DocxFieldError):
    """Error related to security validation (path traversal, size limits, etc.)."""
    pass
