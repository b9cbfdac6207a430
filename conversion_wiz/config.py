"""Configuration loading, validation and graph construction.

The canonical schema resource lives at ``conversion_wiz/schemas/config.schema.json``
and is loaded via ``importlib.resources``. Documents are checked in two layers:
the JSON Schema catches structural problems (missing fields, wrong value types)
and the pydantic models catch semantic ones (empty names, zero factors).

Example:
    >>> config = parse_config({
    ...     "units": [{"name": "Meter", "aliases": ["m"]}, {"name": "Kilometer", "aliases": ["km"]}],
    ...     "conversions_scale": [{"from": "km", "to": "m", "factor": 1000.0}],
    ... })
    >>> graph = build_graph(config)
    >>> graph.edge_count
    2
"""

from __future__ import annotations

import json
import logging
import math
import os
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any, Optional, Union, cast

import jsonschema
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfigurationError
from .graph import ConversionGraph, Edge, Offset, Scale, Transform

logger = logging.getLogger(__name__)

SCHEMA_PACKAGE = "conversion_wiz.schemas"
SCHEMA_FILENAME = "config.schema.json"
DATA_PACKAGE = "conversion_wiz.data"
DEFAULT_CONFIG_FILENAME = "temperature.json"
CONFIG_ENV_VAR = "CONVERSION_WIZ_CONFIG"

ConfigSource = Union[str, "os.PathLike[str]", Traversable]


def _require_text(value: str, what: str) -> str:
    if not value.strip():
        raise ValueError(f"{what} cannot be empty")
    return value


class UnitEntry(BaseModel):
    """One entry of the ``units`` list."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    aliases: tuple[str, ...] = ()
    intermediate: bool = False

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _require_text(value, "unit name")

    @field_validator("aliases")
    @classmethod
    def _validate_aliases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for alias in value:
            _require_text(alias, "unit alias")
        return value


class ScaleConversion(BaseModel):
    """One entry of ``conversions_scale``: ``to = from * factor``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    factor: float

    @field_validator("factor")
    @classmethod
    def _validate_factor(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("factor must be finite")
        if value == 0.0:
            raise ValueError("conversion rate cannot be 0")
        if not math.isfinite(1.0 / value):
            raise ValueError("factor has no finite reciprocal")
        return value

    def transform(self) -> Scale:
        return Scale(self.factor)


class OffsetConversion(BaseModel):
    """One entry of ``conversions_offset``: ``to = from + offset``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    offset: float

    @field_validator("offset")
    @classmethod
    def _validate_offset(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("offset must be finite")
        return value

    def transform(self) -> Offset:
        return Offset(self.offset)


class ConversionConfig(BaseModel):
    """Validated configuration document.

    ``bidirectional`` defaults to true: ``build_graph`` then adds the inverse of
    every configured conversion, so a document listing only one direction per
    pair still converts both ways. Set it to false to get exactly one directed
    edge per entry.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bidirectional: bool = True
    units: tuple[UnitEntry, ...]
    conversions_scale: tuple[ScaleConversion, ...] = ()
    conversions_offset: tuple[OffsetConversion, ...] = ()


def load_schema() -> dict[str, Any]:
    """Load the configuration JSON Schema.

    Example:
        >>> load_schema()["title"]
        'conversion_wiz configuration'
    """
    resource = resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_FILENAME)
    return cast(dict[str, Any], json.loads(resource.read_text(encoding="utf-8")))


def default_config_path() -> Traversable:
    """Return the bundled temperature table."""
    return resources.files(DATA_PACKAGE).joinpath(DEFAULT_CONFIG_FILENAME)


def resolve_config_source(path: Optional[ConfigSource] = None) -> ConfigSource:
    """Pick the explicit path, then ``$CONVERSION_WIZ_CONFIG``, then the bundled table."""
    if path is not None:
        return path
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return from_env
    return default_config_path()


def _format_location(parts: Any) -> str:
    return ".".join(str(part) for part in parts) or "<root>"


def _error_sort_key(error: jsonschema.exceptions.ValidationError) -> list[tuple[int, Any]]:
    return [(0, part) if isinstance(part, int) else (1, str(part)) for part in error.path]


def validate_document(payload: Any) -> dict[str, Any]:
    """Check a raw document against the packaged JSON Schema.

    Raises:
        InvalidConfigurationError: With the location of the first violation.
    """
    if not isinstance(payload, dict):
        raise InvalidConfigurationError("configuration must be a JSON object")

    validator = jsonschema.Draft7Validator(load_schema())
    errors = sorted(validator.iter_errors(payload), key=_error_sort_key)
    if errors:
        first = errors[0]
        raise InvalidConfigurationError(first.message, _format_location(first.path))
    return payload


def parse_config(payload: Any) -> ConversionConfig:
    """Validate a decoded document and return the typed configuration.

    Raises:
        InvalidConfigurationError: On any structural or semantic problem.
    """
    document = validate_document(payload)
    try:
        return ConversionConfig.model_validate(document)
    except ValidationError as exc:
        first = exc.errors()[0]
        message = str(first["msg"]).removeprefix("Value error, ")
        raise InvalidConfigurationError(message, _format_location(first["loc"])) from exc


def load_config(path: Optional[ConfigSource] = None) -> ConversionConfig:
    """Read, decode and validate a configuration file.

    Raises:
        InvalidConfigurationError: If the file is unreadable, not JSON, or invalid.
    """
    source = resolve_config_source(path)
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidConfigurationError(f"cannot read {source}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidConfigurationError(
            f"cannot decode {source} as UTF-8: {exc.reason}", f"byte {exc.start}"
        ) from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidConfigurationError(
            f"malformed JSON: {exc.msg}", f"line {exc.lineno} column {exc.colno}"
        ) from exc

    config = parse_config(payload)
    logger.info(
        "loaded %d units, %d scale and %d offset conversions from %s",
        len(config.units),
        len(config.conversions_scale),
        len(config.conversions_offset),
        source,
    )
    return config


def _same_transform(left: Transform, right: Transform) -> bool:
    if isinstance(left, Scale) and isinstance(right, Scale):
        return math.isclose(left.factor, right.factor)
    if isinstance(left, Offset) and isinstance(right, Offset):
        return math.isclose(left.offset, right.offset, abs_tol=1e-12)
    return False


def build_graph(config: ConversionConfig, *, bidirectional: Optional[bool] = None) -> ConversionGraph:
    """Build a conversion graph from validated configuration.

    Units are registered in document order, then one directed edge is added per
    scale entry and then per offset entry. When ``bidirectional`` (defaulting to
    the document's flag) is set, the inverse of every configured edge is added
    afterwards in the same order, unless that ordered pair was configured
    explicitly.

    Raises:
        DuplicateUnitError: If two units share a name or alias.
        UnknownUnitError: If a conversion references an unregistered unit.
        InvalidConfigurationError: If an ordered pair is configured twice.
    """
    add_inverses = config.bidirectional if bidirectional is None else bidirectional
    graph = ConversionGraph()
    registry = graph.registry

    for entry in config.units:
        registry.register(entry.name, entry.aliases, intermediate=entry.intermediate)

    configured: list[Edge] = []
    entries: list[Union[ScaleConversion, OffsetConversion]] = [
        *config.conversions_scale,
        *config.conversions_offset,
    ]
    for entry in entries:
        source = registry.resolve(entry.source)
        target = registry.resolve(entry.target)
        configured.append(graph.add_edge(source, target, entry.transform()))

    if add_inverses:
        for edge in configured:
            inverse = edge.transform.inverse()
            explicit = graph.edge(edge.target, edge.source)
            if explicit is None:
                graph.add_edge(edge.target, edge.source, inverse)
            elif not _same_transform(explicit.transform, inverse):
                logger.warning(
                    "configured conversion %s -> %s (%s) is not the inverse of %s -> %s (%s)",
                    registry.name_of(edge.target),
                    registry.name_of(edge.source),
                    explicit.transform.describe(),
                    registry.name_of(edge.source),
                    registry.name_of(edge.target),
                    edge.transform.describe(),
                )

    logger.debug("built graph with %d units and %d edges", len(registry), graph.edge_count)
    return graph
