"""JSON export of facade designs.

The document carries the ranked layout options, the arranged axis lengths
and every panel with its apertures, in wall inches. Downstream renderers and
CAD encoders read this document; nothing here draws or emits geometry
formats itself.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from facades.application.dtos import DesignOutput
from facades.domain import AxisSolution, LayoutOption

logger = logging.getLogger(__name__)


def _axis_to_dict(solution: AxisSolution) -> dict[str, Any]:
    return {
        "counts": [{"size": size, "count": n} for size, n in solution.counts],
        "total": solution.total,
        "coverage": solution.coverage,
        "panels": solution.num_panels,
    }


def _option_to_dict(option: LayoutOption) -> dict[str, Any]:
    return {
        "description": option.description,
        "coverage": option.total_coverage,
        "panels": option.total_panels,
        "width": _axis_to_dict(option.width),
        "height": _axis_to_dict(option.height),
    }


class DesignJsonExporter:
    """Exports a design output as JSON."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def to_dict(self, output: DesignOutput) -> dict[str, Any]:
        """Build the JSON-compatible document for ``output``."""
        if not output.is_valid:
            return {"errors": list(output.errors)}
        return {
            "layout_options": [_option_to_dict(o) for o in output.layout_options],
            "selected_layout": output.selected_index,
            "col_widths": list(output.col_widths),
            "row_heights": list(output.row_heights),
            "grid_info": {
                "cols": output.grid_info.cols,
                "rows": output.grid_info.rows,
            },
            "has_image": output.has_image,
            "total_apertures": output.total_apertures,
            "panels": [p.to_dict() for p in output.panels],
        }

    def export_string(self, output: DesignOutput) -> str:
        """Export the design as a JSON string."""
        return json.dumps(self.to_dict(output), indent=self.indent)

    def export(self, output: DesignOutput, path: Path) -> None:
        """Write the design to ``path``, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.debug("Wrote design JSON to %s", path)
