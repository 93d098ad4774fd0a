"""
assets/analyze.py — analiza rozmiaru arkusza CSS pod kątem skracania.

Zlicza nazwy @keyframes, długie powtarzające się fragmenty selektorów
i nazwy zmiennych CSS; wynik służy do ułożenia map w assets/shorten.py.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from assets.minify import DEFAULT_BUDGET

# Długie wzorce, które w praktyce dominują w arkuszach profilu
DEFAULT_PATTERNS: tuple[str, ...] = (
    ".container:has(~ .modal-overlay)",
    ".profile-right",
    ".profile-left",
    ".profile-custom-html",
    ".profile-main-card",
    ".profile-contact-links",
    ".blurb-content",
    ".blurb-section",
    ".card-header",
    ".card-body",
    ".friends-grid",
    ".friend-item",
    "-webkit-clip-path",
    "clip-path",
    "var(--chamfer-shape)",
    "var(--hex)",
    "drop-shadow",
    "backdrop-filter",
    "-webkit-backdrop-filter",
    "rgba(255,255,255,",
    "rgba(0,0,0,",
)

# Docelowa długość skróconej nazwy animacji (do szacowania oszczędności)
SHORT_NAME_LEN = 3

_KEYFRAMES_RE = re.compile(r"@keyframes\s+([\w-]+)")
_CSS_VAR_RE = re.compile(r"--([a-z][\w-]*)")


@dataclass(slots=True)
class NameStat:
    name: str
    count: int

    @property
    def length(self) -> int:
        return len(self.name)

    @property
    def weight(self) -> int:
        """Łączna liczba znaków zajmowanych przez nazwę."""
        return self.length * self.count

    @property
    def savings(self) -> int:
        """Szacowany zysk po skróceniu do SHORT_NAME_LEN znaków."""
        return max(self.length - SHORT_NAME_LEN, 0) * self.count


@dataclass(slots=True)
class CssReport:
    total_len: int
    budget: int
    keyframes: list[NameStat] = field(default_factory=list)
    patterns: list[NameStat] = field(default_factory=list)
    variables: list[NameStat] = field(default_factory=list)

    @property
    def remaining(self) -> int:
        return self.budget - self.total_len


def analyze_css(
    css: str,
    budget: int = DEFAULT_BUDGET,
    patterns: tuple[str, ...] = DEFAULT_PATTERNS,
) -> CssReport:
    report = CssReport(total_len=len(css), budget=budget)

    for name in dict.fromkeys(_KEYFRAMES_RE.findall(css)):
        report.keyframes.append(NameStat(name, css.count(name)))

    for p in patterns:
        n = css.count(p)
        if n > 1:
            report.patterns.append(NameStat(p, n))

    counts: dict[str, int] = {}
    for name in _CSS_VAR_RE.findall(css):
        counts[name] = counts.get(name, 0) + 1
    report.variables = sorted(
        (NameStat(n, c) for n, c in counts.items()),
        key=lambda s: s.weight,
        reverse=True,
    )
    return report
