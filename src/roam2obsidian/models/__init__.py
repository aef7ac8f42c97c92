"""Pydantic data models for roam2obsidian."""

from roam2obsidian.models.export import Emoji, RoamBlock, RoamPage

# Resolve the self-referencing children field
RoamBlock.model_rebuild()
RoamPage.model_rebuild()

__all__ = ["Emoji", "RoamBlock", "RoamPage"]
