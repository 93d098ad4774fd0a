from __future__ import annotations

from assets.analyze import NameStat, analyze_css

CSS = (
    "@keyframes blurb-drift-a{0%{left:0}}"
    ".card-header{color:var(--accent)}"
    ".card-header{animation:blurb-drift-a 1s;border:var(--accent) var(--ink)}"
    ".card-body{--accent:red}"
)


def test_name_stat_properties():
    s = NameStat("blurb-drift-a", 2)
    assert s.length == 13
    assert s.weight == 26
    assert s.savings == 20
    assert NameStat("ab", 5).savings == 0


def test_keyframes_counted_with_usages():
    report = analyze_css(CSS)
    assert [(k.name, k.count) for k in report.keyframes] == [("blurb-drift-a", 2)]


def test_patterns_only_repeated():
    report = analyze_css(CSS, patterns=(".card-header", ".card-body", ".friends-grid"))
    assert [(p.name, p.count) for p in report.patterns] == [(".card-header", 2)]


def test_variables_sorted_by_weight():
    report = analyze_css(CSS)
    assert [(v.name, v.count) for v in report.variables] == [("accent", 3), ("ink", 1)]


def test_remaining_budget():
    report = analyze_css(CSS, budget=100)
    assert report.total_len == len(CSS)
    assert report.remaining == 100 - len(CSS)
