"""Colour parsing, WCAG contrast validation, and palette audits."""

from .audit import (
    AuditSummary,
    ContrastAuditRow,
    audit_palette,
    contrast_matrix,
    format_audit_report,
    summarize_audit,
)
from .color import hsl_string_to_hex, hsl_to_rgb, parse_hex_color, relative_luminance, rgb_to_hex
from .validator import ContrastResult, contrast_ratio, meets_wcag, validate_contrast

__all__ = [
    "AuditSummary",
    "ContrastAuditRow",
    "ContrastResult",
    "audit_palette",
    "contrast_matrix",
    "contrast_ratio",
    "format_audit_report",
    "hsl_string_to_hex",
    "hsl_to_rgb",
    "meets_wcag",
    "parse_hex_color",
    "relative_luminance",
    "rgb_to_hex",
    "summarize_audit",
    "validate_contrast",
]
