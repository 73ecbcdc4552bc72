"""Render configuration models."""

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """Grid geometry and seed for a single render."""

    tile_width: int = Field(default=16, gt=0, description="Tile width in pixels")
    tile_height: int = Field(default=16, gt=0, description="Tile height in pixels")
    num_horizontal: int = Field(default=40, gt=0, description="Grid width in tiles")
    num_vertical: int = Field(default=30, gt=0, description="Grid height in tiles")
    seed: int = Field(default=0, description="Random seed for reproducibility")

    @property
    def aspect_ratio(self) -> float:
        """Width over height of the rendered area in pixels."""
        return (self.tile_width * self.num_horizontal) / (
            self.tile_height * self.num_vertical
        )
