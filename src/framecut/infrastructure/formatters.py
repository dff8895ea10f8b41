"""Output formatters for optimization results."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from framecut.domain.value_objects import CutPiece, PackedProfile

if TYPE_CHECKING:
    from framecut.application.dtos import OptimizationOutput


class CutListFormatter:
    """Formats packed profiles as a text cut list, one block per profile."""

    def format(self, output: "OptimizationOutput") -> str:
        """Format the optimization output as a table."""
        if not output.is_valid:
            return "\n".join(f"Error: {error.message}" for error in output.errors)
        if not output.profiles:
            return "No profiles in cut plan."

        unit = output.unit.value
        lines = ["CUT PLAN", "=" * 60]

        for index, profile in enumerate(output.profiles, 1):
            lines.append(f"Profile {index} ({profile.original_length:g}{unit})")
            lines.append(f"  {'Frame':<12} {'Piece':<16} {'Length':>10}")
            lines.append("  " + "-" * 40)
            for cut in profile.cuts:
                lines.append(f"  {cut.ref_no:<12} {cut.label:<16} {cut.length:>10g}")
            lines.append("  " + "-" * 40)
            if profile.kerf and profile.piece_count > 1:
                lines.append(
                    f"  Kerf: {profile.piece_count - 1} x {profile.kerf:g}{unit}"
                )
            lines.append(
                f"  Utilization: {profile.utilization}%   "
                f"Waste: {profile.waste_length:g}{unit}"
            )
            lines.append("")

        summary = output.summary
        if summary is not None:
            lines.append("=" * 60)
            lines.append(f"Total profiles used: {summary.total_profiles}")
            lines.append(f"Total pieces: {summary.total_pieces}")
            lines.append(f"Total material length: {summary.total_length:g}{unit}")
            lines.append(
                f"Total waste: {summary.total_waste:g}{unit} "
                f"({summary.waste_percentage}%)"
            )

        return "\n".join(lines)


class JsonExporter:
    """Exports optimization output as JSON."""

    def export(self, output: "OptimizationOutput") -> str:
        """Export optimization output as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: "OptimizationOutput") -> dict[str, Any]:
        """Build the JSON-compatible document for the output."""
        if not output.is_valid:
            return {
                "errors": [
                    {
                        "kind": error.kind.value,
                        "message": error.message,
                        "frame_id": error.frame_id,
                        "ref_no": error.ref_no,
                        "sub_component": error.sub_component,
                    }
                    for error in output.errors
                ]
            }

        data: dict[str, Any] = {
            "unit": output.unit.value,
            "profiles": [self._format_profile(p) for p in output.profiles],
        }
        if output.summary is not None:
            data["summary"] = {
                "total_profiles": output.summary.total_profiles,
                "total_pieces": output.summary.total_pieces,
                "total_length": output.summary.total_length,
                "total_waste": output.summary.total_waste,
                "waste_percentage": output.summary.waste_percentage,
            }
        return data

    def _format_profile(self, profile: PackedProfile) -> dict[str, Any]:
        return {
            "original_length": profile.original_length,
            "waste_length": profile.waste_length,
            "kerf": profile.kerf,
            "utilization": profile.utilization,
            "unit": profile.unit.value,
            "cuts": [self._format_cut(cut) for cut in profile.cuts],
        }

    def _format_cut(self, cut: CutPiece) -> dict[str, Any]:
        data: dict[str, Any] = {
            "length": cut.length,
            "unit": cut.unit.value,
            "frame_id": cut.frame_id,
            "ref_no": cut.ref_no,
            "position": cut.position.value,
        }
        if cut.sub_component_name is not None:
            data["sub_component_name"] = cut.sub_component_name
        return data
