"""Console formatters for facade designs."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from facades.domain import GridInfo, LayoutOption, PanelInstance
from facades.domain.value_objects import format_length


class LayoutOptionsFormatter:
    """Formats ranked layout options as a table."""

    def format(self, options: Sequence[LayoutOption], selected: int = 0) -> str:
        """Format layout options, marking the selected one with ``*``."""
        if not options:
            return "No layout possible with the enabled panel sizes."

        lines = [
            "LAYOUT OPTIONS",
            "=" * 78,
            f"{'#':<4} {'Coverage':<10} {'Panels':<8} {'Layout'}",
            "-" * 78,
        ]
        for i, option in enumerate(options):
            marker = "*" if i == selected else " "
            lines.append(
                f"{marker}{i:<3} {option.total_coverage * 100:<9.1f}% "
                f"{option.total_panels:<8} {option.description}"
            )
        return "\n".join(lines)


class PanelScheduleFormatter:
    """Formats the panel schedule with per-panel aperture counts."""

    def format(
        self,
        panels: Sequence[PanelInstance],
        grid_info: GridInfo | None = None,
    ) -> str:
        """Format panels in row-major order with a size summary."""
        if not panels:
            return "No panels."

        lines = [
            "PANEL SCHEDULE",
            "=" * 70,
            f"{'Panel':<8} {'Size':<14} {'X':<10} {'Y':<10} {'Apertures'}",
            "-" * 70,
        ]
        for panel in panels:
            lines.append(
                f"{panel.label:<8} {panel.size_label:<14} {panel.x:<10.3f} "
                f"{panel.y:<10.3f} {len(panel.apertures)}"
            )
        lines.append("-" * 70)

        sizes = Counter(p.size_label for p in panels)
        for size_label, count in sorted(sizes.items()):
            lines.append(f"  {count} x {size_label}")

        diameters = Counter(a.diameter for p in panels for a in p.apertures)
        total = sum(diameters.values())
        lines.append(f"{'TOTAL APERTURES':<34} {total}")
        for diameter, count in sorted(diameters.items(), reverse=True):
            lines.append(f'  {format_length(diameter)}": {count}')

        if grid_info is not None and grid_info.cols:
            lines.append(f"Lattice: {grid_info.cols} cols x {grid_info.rows} rows")
        return "\n".join(lines)
