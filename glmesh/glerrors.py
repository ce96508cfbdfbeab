"""Names and report lines for OpenGL error codes."""

from __future__ import annotations

import enum
from typing import Iterable


class GLErrorCode(enum.IntEnum):
    """OpenGL error codes as returned by glGetError."""

    NO_ERROR = 0
    INVALID_ENUM = 0x0500
    INVALID_VALUE = 0x0501
    INVALID_OPERATION = 0x0502
    OUT_OF_MEMORY = 0x0505
    INVALID_FRAMEBUFFER_OPERATION = 0x0506


_REPORTED = {
    GLErrorCode.INVALID_OPERATION,
    GLErrorCode.INVALID_ENUM,
    GLErrorCode.INVALID_VALUE,
    GLErrorCode.OUT_OF_MEMORY,
    GLErrorCode.INVALID_FRAMEBUFFER_OPERATION,
}


def error_name(code: int) -> str:
    """Name of a reportable error code, or an empty string if unknown."""
    try:
        member = GLErrorCode(code)
    except ValueError:
        return ""
    return member.name if member in _REPORTED else ""


def describe_errors(codes: Iterable[int], file: str, line: int) -> list[str]:
    """Report lines for queued error codes, stopping at the first NO_ERROR."""
    messages = []
    for code in codes:
        if code == GLErrorCode.NO_ERROR:
            break
        messages.append(f"GL_{error_name(code)} - {file}:{line}")
    return messages