"""Structural checks of a parsed document.

A renderer relies on the parallel point streams lining up and on the
segment list alternating between travel and cutting runs.  These checks
catch violations before the geometry is handed on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from ..core.toolpath.base import ParsedDocument


@dataclass
class ValidationIssue:
    """A single problem found in the document."""

    severity: str  # "error" or "warning"
    message: str
    segment_index: Optional[int] = None


@dataclass
class ValidationResult:
    """Result of validating one document."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.severity == "error" for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == "warning" for i in self.issues)

    @property
    def is_ok(self) -> bool:
        return len(self.issues) == 0


def validate_document(document: ParsedDocument) -> ValidationResult:
    """Check *document* for internal consistency.

    Checks performed:
    - Point, travel-flag and Z-value streams have equal length
    - Each Z value matches its point
    - Every coordinate is finite
    - No segment is empty
    - Adjacent segments differ in travel classification
    - Document is non-empty
    """
    result = ValidationResult()

    n_points = len(document.points)
    if len(document.travel_flags) != n_points or len(document.z_values) != n_points:
        result.issues.append(ValidationIssue(
            "error",
            f"Stream lengths differ: {n_points} points, "
            f"{len(document.travel_flags)} travel flags, "
            f"{len(document.z_values)} Z values",
        ))
    else:
        for idx, (pt, z) in enumerate(zip(document.points, document.z_values)):
            if pt[2] != z:
                result.issues.append(ValidationIssue(
                    "error",
                    f"Z value {z} at point {idx} does not match point Z {pt[2]}",
                ))
                break

    if not all(math.isfinite(c) for pt in document.points for c in pt):
        result.issues.append(ValidationIssue(
            "error", "Point stream contains non-finite coordinates",
        ))

    for idx, seg in enumerate(document.segments):
        if seg.is_empty():
            result.issues.append(ValidationIssue(
                "error", f"Segment {idx} has no points", idx,
            ))
        if idx > 0 and seg.is_travel == document.segments[idx - 1].is_travel:
            kind = "travel" if seg.is_travel else "cutting"
            result.issues.append(ValidationIssue(
                "error",
                f"Segments {idx - 1} and {idx} are both {kind}",
                idx,
            ))

    if document.is_empty:
        result.issues.append(ValidationIssue(
            "warning",
            "Document contains no motion; nothing will be drawn",
        ))

    return result
