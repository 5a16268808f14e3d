#!/usr/bin/env python3
"""
Example: Basic usage of Dependency Mapper as a Python library
"""

from dependency_mapper import Zone, analyze

edges = [
    ("web", "services"),
    ("web", "domain"),
    ("services", "domain"),
    ("services", "infra"),
    ("domain", "infra"),  # stable domain leaning on volatile infra
    ("infra", "vendor_sdk"),
    ("infra", "logging"),
    ("infra", "config"),
]
type_counts = [
    ("domain", 12, 5),
    ("infra", 20, 1),
    ("services", 8, 0),
]

result = analyze(edges, type_counts)

for name, m in result.metrics.items():
    i = "undefined" if m.instability is None else f"{m.instability:.2f}"
    a = "undefined" if m.abstractness is None else f"{m.abstractness:.2f}"
    print(f"{name:12} Ca={m.ca} Ce={m.ce} I={i} A={a} zone={m.zone.value}")

for cycle in result.cycles:
    print("cycle:", " -> ".join(cycle.path))

for v in result.violations:
    print(f"SDP violation: {v.depender} -> {v.dependee} (delta I {v.delta_i:.2f})")

print("Zone of Pain:", ", ".join(result.modules_in_zone(Zone.PAIN)) or "none")
