"""Graphics configuration for the rendering back end."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GfxConfiguration:
    """Colour, depth and window settings requested from the graphics back end."""

    red_bits: int = 8
    green_bits: int = 8
    blue_bits: int = 8
    alpha_bits: int = 8
    depth_bits: int = 24
    stencil_bits: int = 0
    msaa_samples: int = 0
    screen_width: int = 1920
    screen_height: int = 1080
    app_name: str = "Corona Engine"

    def __str__(self) -> str:
        return (
            f"App Name:{self.app_name}\n"
            "GfxConfiguration:"
            f" R:{self.red_bits}"
            f" G:{self.green_bits}"
            f" B:{self.blue_bits}"
            f" A:{self.alpha_bits}"
            f" D:{self.depth_bits}"
            f" S:{self.stencil_bits}"
            f" M:{self.msaa_samples}"
            f" W:{self.screen_width}"
            f" H:{self.screen_height}\n"
        )