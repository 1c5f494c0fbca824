"""Application commands (use cases) for facade design."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from facades.domain import HoleGridGenerator, HoleResult, LayoutResult, build_layout
from facades.domain.grayscale import GrayscaleField
from facades.domain.services import reference_size
from facades.infrastructure.imaging import ImagePreprocessor

from .dtos import DesignInput, DesignOutput

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    """Independently recomputable pipeline stages."""

    IMAGE = "image"
    LAYOUT = "layout"
    APERTURES = "apertures"


IMAGE_KEYS = frozenset({"image", "brightness", "contrast", "invert"})
LAYOUT_KEYS = frozenset(
    {"width", "height", "gap", "widths", "heights", "selected_layout"}
)
APERTURE_KEYS = frozenset(
    {
        "mode",
        "spacing_x",
        "spacing_y",
        "cols",
        "rows",
        "min_spacing",
        "pattern",
        "margin",
        "sizes",
        "threshold",
        "gamma",
    }
)


def stages_for(changed_keys: Iterable[str]) -> frozenset[Stage]:
    """Return the stages whose inputs include any of ``changed_keys``.

    Apertures depend on both the image and the layout, so they re-run
    whenever either does. Keys outside every group need no recompute.
    """
    keys = set(changed_keys)
    stages: set[Stage] = set()
    if keys & IMAGE_KEYS:
        stages.update({Stage.IMAGE, Stage.APERTURES})
    if keys & LAYOUT_KEYS:
        stages.update({Stage.LAYOUT, Stage.APERTURES})
    if keys & APERTURE_KEYS:
        stages.add(Stage.APERTURES)
    return frozenset(stages)


class GenerateFacadeCommand:
    """Command to design a perforated facade.

    Runs the image, layout and aperture stages. Each stage is also exposed
    on its own so callers can re-run only what a configuration change
    affects (see :meth:`recompute`).
    """

    def process_image(self, design_input: DesignInput) -> GrayscaleField | None:
        """Convert the source image into a grayscale field, if there is one."""
        if design_input.image is None:
            return None
        adj = design_input.adjustments
        preprocessor = ImagePreprocessor(adj.brightness, adj.contrast, adj.invert)
        return preprocessor.process(design_input.image)

    def solve_layout(self, design_input: DesignInput) -> LayoutResult:
        """Solve the wall tiling and materialize the selected layout."""
        return build_layout(
            design_input.wall,
            design_input.catalog,
            design_input.selected_layout,
        )

    def compute_apertures(
        self,
        design_input: DesignInput,
        layout: LayoutResult,
        grayscale: GrayscaleField | None,
    ) -> HoleResult:
        """Regenerate apertures for every panel in ``layout``."""
        holes = design_input.holes
        generator = HoleGridGenerator(
            grid=design_input.grid,
            holes=holes.to_catalog(),
            wall=design_input.wall,
            threshold=holes.threshold,
            gamma=holes.gamma,
            reference=reference_size(layout.grid.col_widths, layout.grid.row_heights),
        )
        return generator.apply(layout.grid.panels, grayscale)

    def execute(self, design_input: DesignInput) -> DesignOutput:
        """Execute every stage.

        Args:
            design_input: Wall, catalogs, lattice settings and source image.

        Returns:
            DesignOutput with layout options, perforated panels and lattice
            info, or with ``errors`` populated if the input is invalid.
        """
        errors = design_input.validate()
        if errors:
            return DesignOutput(errors=errors)

        grayscale = self.process_image(design_input)
        layout = self.solve_layout(design_input)
        holes = self.compute_apertures(design_input, layout, grayscale)
        logger.info(
            "Designed %d panels with %d apertures",
            len(holes.panels),
            holes.total_apertures,
        )
        return DesignOutput(
            layout=layout,
            panels=holes.panels,
            grid_info=holes.grid_info,
            grayscale=grayscale,
        )

    def recompute(
        self,
        previous: DesignOutput,
        design_input: DesignInput,
        changed_keys: Iterable[str],
    ) -> DesignOutput:
        """Re-run only the stages affected by ``changed_keys``.

        Stages that are not affected reuse their results from ``previous``.
        An invalid or errored previous output triggers a full execute.
        """
        if not previous.is_valid:
            return self.execute(design_input)
        errors = design_input.validate()
        if errors:
            return DesignOutput(errors=errors)

        stages = stages_for(changed_keys)
        if not stages:
            return previous
        logger.debug("Recomputing stages: %s", sorted(s.value for s in stages))

        grayscale = (
            self.process_image(design_input)
            if Stage.IMAGE in stages
            else previous.grayscale
        )
        layout = (
            self.solve_layout(design_input)
            if Stage.LAYOUT in stages
            else previous.layout
        )
        holes = self.compute_apertures(design_input, layout, grayscale)
        return DesignOutput(
            layout=layout,
            panels=holes.panels,
            grid_info=holes.grid_info,
            grayscale=grayscale,
        )
