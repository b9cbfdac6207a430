"""conversion_wiz package exports."""

from .composer import apply, describe_path
from .config import (
    ConversionConfig,
    OffsetConversion,
    ScaleConversion,
    UnitEntry,
    build_graph,
    load_config,
    parse_config,
)
from .converter import UnitConverter, load_converter
from .errors import (
    ConversionError,
    DuplicateUnitError,
    InvalidConfigurationError,
    NoPathFoundError,
    UnknownUnitError,
)
from .graph import ConversionGraph, Edge, Offset, Scale, Transform
from .registry import Unit, UnitId, UnitRegistry
from .resolver import Path, find_path

__all__ = [
    "Unit",
    "UnitId",
    "UnitRegistry",
    "ConversionGraph",
    "Edge",
    "Scale",
    "Offset",
    "Transform",
    "Path",
    "find_path",
    "apply",
    "describe_path",
    "UnitEntry",
    "ScaleConversion",
    "OffsetConversion",
    "ConversionConfig",
    "parse_config",
    "load_config",
    "build_graph",
    "UnitConverter",
    "load_converter",
    "ConversionError",
    "UnknownUnitError",
    "DuplicateUnitError",
    "NoPathFoundError",
    "InvalidConfigurationError",
]
