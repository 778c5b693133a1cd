"""Reference parsing: raw reference strings and catalog codes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

ALL_PARTS_PATTERN = re.compile(r"\s*\(\s*all\s+parts\s*\)", re.IGNORECASE)

YEAR_PATTERN = re.compile(r"^(?P<year>\d{4})(?!\d)(?P<rest>.*)$", re.DOTALL)

# A colon after one of these belongs to the suffix, not to the document code
SUFFIX_MARKER = re.compile(r"\+|/\s*AMD", re.IGNORECASE)


class Reference(BaseModel):
    """A parsed reference as requested by the caller."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Document code without year or all-parts marker")
    year: str | None = Field(default=None, description="Requested year (4 digits)")
    all_parts: bool = Field(default=False, description="Cite every part of the document")
    part: str | None = Field(default=None, description="Part number for packaged-part searches")

    @property
    def id(self) -> str:
        """The reference as ``code[:year]``."""
        return f"{self.code}:{self.year}" if self.year else self.code


def parse_reference(reference: str, year: str | None = None) -> Reference:
    """
    Parse a free-form reference such as ``IEC 61000:2005`` or ``IEC 61000 (all parts)``.

    Never raises: anything unrecognized is kept verbatim as the code.

    Args:
        reference: Raw reference string
        year: Explicit year; takes precedence over a year embedded in the code

    Returns:
        The parsed reference
    """
    code = (reference or "").strip()
    year = year.strip() if year and year.strip() else None

    left, colon, right = code.partition(":")
    if colon and left.strip() and not SUFFIX_MARKER.search(left):
        if match := YEAR_PATTERN.match(right):
            code = (left + match.group("rest")).strip()
            year = year or match.group("year")

    all_parts = False
    # Removing one marker can join the text around it into another
    while ALL_PARTS_PATTERN.search(code):
        all_parts = True
        code = ALL_PARTS_PATTERN.sub("", code).strip()

    return Reference(code=code, year=year, all_parts=all_parts)


@dataclass(frozen=True)
class ParsedCode:
    """Fields extracted from a document code such as ``IEC 60050-311:2011+AMD1/AMD 2``."""

    family: str
    number: str
    part: str | None = None
    year: str | None = None
    bundle: str | None = None
    corrigendum: str | None = None

    @property
    def code(self) -> str:
        """Comparable code: ``FAMILY NUMBER[-PART]``."""
        base = f"{self.family} {self.number}"
        return f"{base}-{self.part}" if self.part else base


class CodeParser:
    """Extracts :class:`ParsedCode` fields from query and candidate codes."""

    # Query codes may carry a trailing letter after the dashed number (e.g. 60601-2-4A)
    QUERY_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<code>(?P<family>(?:ISO|IEC)[^\d]*)\s(?P<id>[\d-]+\w?))"
        r"(?::(?P<year>\d{4}))?"
        r"(?P<bundle>\+[^\s/]+)?"
        r"(?:/(?P<corr>AMD\s*\d+))?"
    )

    CANDIDATE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<code>(?P<family>(?:ISO|IEC)[^\d]*)\s(?P<id>\d+(?:-\w+)?))"
        r"(?::(?P<year>\d{4}))?"
        r"(?P<bundle>\+[^\s/]+)?"
        r"(?:/(?P<corr>AMD\s*\d+))?"
    )

    def parse_query(self, code: str) -> ParsedCode | None:
        """Parse the caller's code, or None if it is not an ISO/IEC code."""
        return self._parse(self.QUERY_PATTERN, code)

    def parse_candidate(self, code: str) -> ParsedCode | None:
        """Parse a catalog hit's code, or None if it does not fit."""
        return self._parse(self.CANDIDATE_PATTERN, code)

    @staticmethod
    def _parse(pattern: re.Pattern[str], code: str) -> ParsedCode | None:
        match = pattern.match(code.strip().upper())
        if match is None:
            return None

        number, _, part = match.group("id").partition("-")
        corr = match.group("corr")
        return ParsedCode(
            family=match.group("family").strip(),
            number=number,
            part=part or None,
            year=match.group("year"),
            bundle=match.group("bundle"),
            corrigendum=re.sub(r"\s+", "", corr) if corr else None,
        )


def strip_packaged_part(code: str) -> str:
    """Drop everything after the first digit of the part: ``IEC 60050-311`` -> ``IEC 60050-3``."""
    return re.sub(r"(?<=-\d)\w*", "", code, count=1)


def strip_part(code: str) -> str:
    """Drop the whole part: ``IEC 61000-4-2`` -> ``IEC 61000``."""
    return re.sub(r"-\d+[\w-]*", "", code, count=1)


def extract_part(code: str) -> str | None:
    """Digits following the first dash, if any."""
    match = re.search(r"(?<=-)\d+", code)
    return match.group() if match else None


def packaged_base_code(code: str) -> str:
    """Parent code of a packaged part: ``IEC 60050-311`` -> ``IEC 60050-3``."""
    return re.sub(r"(?<=-\d)\d+", "", code, count=1)
