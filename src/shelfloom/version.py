"""Parsing and comparison of BookStack release versions (e.g. ``v24.05.1``)."""

import re
from dataclasses import dataclass
from typing import Self

from .exceptions import ShelfloomError

_VERSION_RE = re.compile(
    r"^v?(?P<major>\d+)\.(?P<minor>\d+)"
    r"(?:\.(?P<revision>\d+))?(?:[.\-+](?P<ext>.*))?$"
)


@dataclass(frozen=True, order=True)
class BookStackVersion:
    """A BookStack version number.

    Versions compare by major, minor and revision, then by the free-form
    suffix (``ext``) as plain text.
    """

    major: int
    minor: int
    revision: int = 0
    ext: str = ""

    @classmethod
    def try_parse(cls, text: str) -> Self | None:
        """Parse ``text``, returning None when it is not a version number.

        Accepts an optional leading ``v``. Anything after the numeric parts
        (following ``-``, ``+`` or a non-numeric third part) is kept as ``ext``.
        """
        match = _VERSION_RE.match(text.strip())
        if match is None:
            return None
        revision = match.group("revision")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            revision=int(revision) if revision is not None else 0,
            ext=match.group("ext") or "",
        )

    @classmethod
    def parse(cls, text: str) -> Self:
        version = cls.try_parse(text)
        if version is None:
            raise ShelfloomError(f"Unexpected version format: {text!r}")
        return version

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.revision}"
        return f"{text}-{self.ext}" if self.ext else text
