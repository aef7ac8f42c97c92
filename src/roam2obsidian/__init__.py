"""roam2obsidian - Convert Roam Research exports to Obsidian markdown.

Pages become markdown files, block references become ``[[Page#^uid]]``
links with matching ``^uid`` anchors, and daily notes are renamed to
sortable ``YYYY-MM-DD`` titles.

Example:
    >>> from roam2obsidian import ConverterConfig, ExportConverter
    >>> converter = ExportConverter(ConverterConfig(output_dir=Path("vault")))
    >>> result = converter.convert_file(Path("roam-export.json"))
    >>> result.pages_written
    42
"""

__version__ = "0.1.0"

from roam2obsidian.models.config import ConverterConfig
from roam2obsidian.services.converter import ExportConverter

__all__ = ["ConverterConfig", "ExportConverter", "__version__"]
