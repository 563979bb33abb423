"""Typed exception hierarchy for embed-verify."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from embed_verify.verification.checks import Expectation


class EmbedVerifyError(Exception):
    """Base exception for all embed-verify errors."""


class DimensionMismatchError(EmbedVerifyError, ValueError):
    """Two vectors of different length were compared."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Vectors must be of the same length, got {left} and {right}"
        )


class ImageLoadError(EmbedVerifyError):
    """An image URL could not be fetched or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not load image from URL: {url} ({reason})")


class OrderingViolationError(EmbedVerifyError, AssertionError):
    """One or more relative-ordering expectations did not hold."""

    def __init__(self, violations: list[Expectation]) -> None:
        self.violations = violations
        lines = [f"- {v.label} ({v.higher:.4f} <= {v.lower:.4f})" for v in violations]
        super().__init__(
            f"{len(violations)} ordering expectation(s) violated:\n" + "\n".join(lines)
        )
