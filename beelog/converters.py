"""Converters that turn formatted text into the bytes written to a file."""

import os

UTF8_BOM = b"\xef\xbb\xbf"


class UTF8Converter:
    """Encodes text as UTF-8; a file header is preceded by a byte order mark."""

    def header(self, text):
        return UTF8_BOM + self.convert(text)

    def convert(self, text):
        return text.encode("utf-8")


class NativeEOLConverter:
    """Rewrites line feeds to a line ending before passing text on."""

    def __init__(self, inner=None, eol=None):
        self.inner = inner if inner is not None else UTF8Converter()
        self.eol = os.linesep if eol is None else eol

    def _fix_line_endings(self, text):
        if self.eol == "\n":
            return text
        return text.replace("\n", self.eol)

    def header(self, text):
        return self.inner.header(self._fix_line_endings(text))

    def convert(self, text):
        return self.inner.convert(self._fix_line_endings(text))