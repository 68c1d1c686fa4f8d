"""Palette-wide contrast audit.

Ratios for a whole palette are computed at once as a symmetric matrix, so an
audit of every token combination costs a single vectorised pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

import numpy as np

from ..config import DEFAULT_CONFIG, A11yConfig
from ..style.palette import DEFAULT_COMBINATIONS, ColorCombination
from .color import hsl_string_to_hex, parse_hex_color
from .validator import meets_wcag

_LUMINANCE_WEIGHTS = np.asarray([0.2126, 0.7152, 0.0722], dtype=np.float64)


@dataclass(frozen=True)
class ContrastAuditRow:
    context: str
    foreground_token: str
    background_token: str
    foreground_hex: str
    background_hex: str
    ratio: float
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool


@dataclass(frozen=True)
class AuditSummary:
    total: int
    failures: int
    failures_by_mode: dict[str, int]

    @property
    def success_rate(self) -> int:
        if self.total == 0:
            return 100
        return int(round(((self.total - self.failures) / self.total) * 100))


def luminance_vector(colors: Sequence[object]) -> tuple[np.ndarray, np.ndarray]:
    """Return (luminance, valid_mask) for a sequence of hex colours."""

    parsed = [parse_hex_color(color) for color in colors]
    valid = np.asarray([rgb is not None for rgb in parsed], dtype=bool)
    rgb = np.asarray([rgb if rgb is not None else (0, 0, 0) for rgb in parsed], dtype=np.float64)
    rgb = rgb.reshape(len(parsed), 3) / 255.0
    linear = np.where(rgb <= 0.03928, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)
    return linear @ _LUMINANCE_WEIGHTS, valid


def contrast_matrix(colors: Sequence[object]) -> np.ndarray:
    """N x N contrast ratios; malformed colours contribute 1.0 everywhere."""

    if len(colors) == 0:
        return np.zeros((0, 0), dtype=np.float64)
    lum, valid = luminance_vector(colors)
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    ratios = (lighter + 0.05) / (darker + 0.05)
    ratios[~np.logical_and.outer(valid, valid)] = 1.0
    return ratios


def resolve_palette_hex(palette: Mapping[str, str]) -> dict[str, str]:
    """Map tokens to `#rrggbb`; hex values pass through, HSL tokens convert."""

    out: dict[str, str] = {}
    for token, value in palette.items():
        rgb = parse_hex_color(value)
        if rgb is not None:
            out[token] = "#%02x%02x%02x" % rgb
        else:
            out[token] = hsl_string_to_hex(value)
    return out


def audit_palette(
    palette: Mapping[str, str],
    combinations: Iterable[ColorCombination] = DEFAULT_COMBINATIONS,
    *,
    config: A11yConfig | None = None,
) -> list[ContrastAuditRow]:
    cfg = config or DEFAULT_CONFIG
    hex_by_token = resolve_palette_hex(palette)
    tokens = list(hex_by_token)
    index = {token: i for i, token in enumerate(tokens)}
    ratios = contrast_matrix([hex_by_token[t] for t in tokens])

    rows: list[ContrastAuditRow] = []
    for combo in combinations:
        if combo.foreground not in index or combo.background not in index:
            continue
        ratio = float(ratios[index[combo.foreground], index[combo.background]])
        rows.append(
            ContrastAuditRow(
                context=combo.context,
                foreground_token=combo.foreground,
                background_token=combo.background,
                foreground_hex=hex_by_token[combo.foreground],
                background_hex=hex_by_token[combo.background],
                ratio=round(ratio, 2),
                passes_aa=meets_wcag(ratio, "AA", False, config=cfg),
                passes_aaa=meets_wcag(ratio, "AAA", False, config=cfg),
                passes_aa_large=meets_wcag(ratio, "AA", True, config=cfg),
            )
        )
    return rows


def summarize_audit(rows_by_mode: Mapping[str, Sequence[ContrastAuditRow]]) -> AuditSummary:
    failures_by_mode = {mode: sum(1 for row in rows if not row.passes_aa) for mode, rows in rows_by_mode.items()}
    return AuditSummary(
        total=sum(len(rows) for rows in rows_by_mode.values()),
        failures=sum(failures_by_mode.values()),
        failures_by_mode=failures_by_mode,
    )


def format_audit_report(rows_by_mode: Mapping[str, Sequence[ContrastAuditRow]]) -> str:
    lines = [
        "Color Contrast Audit",
        "",
        "WCAG 2.1: AA normal 4.5:1, AA large 3:1, AAA normal 7:1, AAA large 4.5:1",
    ]
    for mode, rows in rows_by_mode.items():
        lines.append("")
        lines.append(f"[{mode}]")
        lines.append("-" * 80)
        for row in rows:
            status = "PASS" if row.passes_aa else "FAIL"
            lines.append(f"{status} {row.context}")
            lines.append(f"    {row.background_hex} -> {row.foreground_hex} ({row.ratio}:1)")
            lines.append(
                "    AA: {} | AAA: {} | AA Large: {}".format(
                    _pass_fail(row.passes_aa), _pass_fail(row.passes_aaa), _pass_fail(row.passes_aa_large)
                )
            )
    summary = summarize_audit(rows_by_mode)
    lines.append("")
    lines.append(f"Total combinations tested: {summary.total}")
    lines.append(f"WCAG AA failures: {summary.failures}")
    lines.append(f"Success rate: {summary.success_rate}%")
    return "\n".join(lines)


def _pass_fail(ok: bool) -> str:
    return "PASS" if ok else "FAIL"
