"""Pure check that a session's assets hang together visually."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from template_studio.l1_entities.asset import AssetType, GeneratedAsset


@dataclass(frozen=True)
class CoordinationReport:
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def is_coordinated(self) -> bool:
        return not self.issues


def check_style_coordination(
    assets: Sequence[GeneratedAsset],
    expected_types: Sequence[AssetType],
) -> CoordinationReport:
    """Flag mixed styles and asset types the template asked for but never got."""
    issues: list[str] = []
    suggestions: list[str] = []

    if len({a.style for a in assets}) > 1:
        issues.append('Inconsistent styles detected across assets')
        suggestions.append('Regenerate assets with consistent style parameters')

    present = {a.type for a in assets}
    missing = [t.value for t in expected_types if t not in present]
    if missing:
        issues.append(f'Missing asset types: {", ".join(missing)}')
        suggestions.append('Generate missing asset types for complete template')

    if assets:
        suggestions.append('Review generated assets for visual harmony')

    return CoordinationReport(issues=issues, suggestions=suggestions)
