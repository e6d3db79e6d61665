# File: /excusebot/utils/errors.py
"""
Error taxonomy for ExcuseBot.

Every error aborts the current unit of work (one CLI run or one HTTP
request). Nothing is retried.
"""


class ExcuseError(RuntimeError):
    """Base class for expected failures while producing an excuse."""


class ResourceLoadError(ExcuseError):
    """Template or font file is missing or unreadable."""


class DecodeError(ExcuseError):
    """Bytes could not be decoded into an image or font."""


class FontParseError(DecodeError):
    """Font file exists but is not a usable TrueType/OpenType font."""


class TypeMismatchError(ExcuseError):
    """Decoded template is not in the pixel format the renderer draws on."""


class DrawError(ExcuseError):
    """Rasterizing or compositing a caption failed."""


class TextTooLongError(DrawError):
    """Caption does not fit its box even at the minimum font size."""


class UploadError(ExcuseError):
    """Image host rejected the upload or could not be reached."""


class EncodeError(ExcuseError):
    """Finished bitmap could not be serialized to PNG."""
