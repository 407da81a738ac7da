"""Errors raised while converting a font sheet."""

from __future__ import annotations


class Png2FlfError(Exception):
    """Base class for every error reported by the command line."""


class DecodeError(Png2FlfError):
    """The input image is missing or cannot be decoded."""


class InvalidDimensions(Png2FlfError, ValueError):
    """The image size does not split into the 16x6 glyph grid."""


class InvalidCharacterConfig(Png2FlfError, ValueError):
    """A pixel or blank character is not exactly one character."""


class WriteError(Png2FlfError):
    """The FIGlet font could not be written to the output path."""
