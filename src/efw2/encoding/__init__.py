"""EFW2 record encoder: field formatters, record builders and file assembly."""

from __future__ import annotations

from efw2.encoding.assembler import Submission, assemble, encode_submission
from efw2.encoding.fields import format_amount, format_text
from efw2.encoding.records import FixedWidthRecord, build_ra, build_re, build_rf, build_rt, build_rw

__all__ = [
    "FixedWidthRecord",
    "Submission",
    "assemble",
    "build_ra",
    "build_re",
    "build_rf",
    "build_rt",
    "build_rw",
    "encode_submission",
    "format_amount",
    "format_text",
]
