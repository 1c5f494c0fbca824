"""Pytest configuration and shared fixtures for facade tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import numpy as np
import pytest
from PIL import Image

from facades.domain import (
    GridSpecification,
    HoleSizeCatalog,
    PanelInstance,
    PanelSizeCatalog,
    WallSpecification,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def default_wall() -> WallSpecification:
    """20' x 10' wall with a quarter-inch gap."""
    return WallSpecification(width=240.0, height=120.0, gap=0.25)


@pytest.fixture
def default_catalog() -> PanelSizeCatalog:
    """Default enabled panel sizes."""
    return PanelSizeCatalog(widths=(24, 48), heights=(96, 120, 144))


@pytest.fixture
def small_grid() -> GridSpecification:
    """2" pitch, 1" margin rectangular lattice."""
    return GridSpecification(spacing_x=2.0, spacing_y=2.0, min_spacing=2.0, margin=1.0)


@pytest.fixture
def standard_holes() -> HoleSizeCatalog:
    return HoleSizeCatalog()


@pytest.fixture
def make_panel() -> Callable[..., PanelInstance]:
    """Factory for panels with sensible label defaults."""

    def _make(
        x: float = 0.0,
        y: float = 0.0,
        width: float = 10.0,
        height: float = 10.0,
        col: int = 0,
        row: int = 0,
        label: str = "A1",
    ) -> PanelInstance:
        return PanelInstance(
            x=x,
            y=y,
            width=width,
            height=height,
            col=col,
            row=row,
            label=label,
            size_label=f'{width:g}"x{height:g}"',
        )

    return _make


@pytest.fixture
def uniform_field() -> Callable[[float], np.ndarray]:
    """Factory for a 1x1 field, which samples to exactly its value."""

    def _make(value: float) -> np.ndarray:
        return np.full((1, 1), value, dtype=np.float32)

    return _make


# =============================================================================
# File fixtures
# =============================================================================


@pytest.fixture
def gradient_image() -> Image.Image:
    """64x32 RGB image, black on the left fading to white on the right."""
    ramp = np.linspace(0, 255, 64, dtype=np.float32)
    gray = np.tile(ramp, (32, 1)).astype(np.uint8)
    return Image.fromarray(np.stack([gray] * 3, axis=-1))


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a configuration dict to ``tmp_path`` and return its path."""

    def _write(data: dict[str, Any], name: str = "facade.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
