"""Loading of JSON print job files.

Errors are reported as ``ConfigError`` with one detail per problem. Schema
problems name the JSON path and, where the offending section can still be
read, the job context it belongs to: the price band's quantity range and
label (``band 2: 100-499 (Bronze)``), the sheet preset or size, or the
item trim size.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from printsheet.application.config.schema import PrintJobConfiguration

_VALUE_ERROR_PREFIX = "Value error, "


class ConfigError(Exception):
    """A job file could not be read or does not describe a valid job.

    Attributes:
        message: Summary suitable for a single error line.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: The job file, when loading from disk.
        details: One dictionary per problem. Schema problems carry
            ``path``, ``message``, ``value``, ``error_type`` and ``context``;
            JSON syntax problems carry ``line``, ``column``, ``message`` and
            the offending source ``text``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def load_config(path: Path) -> PrintJobConfiguration:
    """Read and validate a print job file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or not a
            valid print job.
    """
    return _build(_read_json(path), source=path)


def load_config_from_dict(data: dict[str, Any]) -> PrintJobConfiguration:
    """Validate an already parsed print job, as posted to the web API.

    Raises:
        ConfigError: If ``data`` is not a valid print job.
    """
    return _build(data, source=None)


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        lines = text.splitlines()
        source_line = lines[e.lineno - 1].strip() if 0 < e.lineno <= len(lines) else ""
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                    "text": source_line,
                }
            ],
        )


def _build(data: Any, source: Path | None) -> PrintJobConfiguration:
    where = f" in {source}" if source is not None else ""
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid print job{where}: expected a JSON object, "
            f"got {type(data).__name__}",
            error_type="validation",
            path=source,
            details=[
                {
                    "path": "",
                    "message": "Print job must be a JSON object",
                    "value": None,
                    "error_type": "object_type",
                    "context": None,
                }
            ],
        )

    try:
        return PrintJobConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [_problem(err, data) for err in e.errors()]
        lines = [f"Invalid print job{where}:"]
        lines.extend(f"  - {_describe(detail)}" for detail in details)
        raise ConfigError(
            "\n".join(lines), error_type="validation", path=source, details=details
        )


def _problem(err: Any, data: dict[str, Any]) -> dict[str, Any]:
    loc = tuple(err["loc"])
    message = err["msg"]
    if message.startswith(_VALUE_ERROR_PREFIX):
        message = message[len(_VALUE_ERROR_PREFIX):]
    return {
        "path": _json_path(loc),
        "message": message,
        "value": err.get("input"),
        "error_type": err["type"],
        "context": _job_context(loc, data),
    }


def _describe(detail: dict[str, Any]) -> str:
    where = detail["path"] or "(root)"
    if detail["context"]:
        where = f"{where} [{detail['context']}]"
    value = detail["value"]
    if value is None or isinstance(value, (dict, list)):
        return f"{where}: {detail['message']}"
    return f"{where}: {detail['message']} (got: {value!r})"


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic location as a JSON path, e.g. ``pricing.bands[0].min_qty``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _job_context(loc: tuple[str | int, ...], data: dict[str, Any]) -> str | None:
    """Describe the part of the job a problem sits in, read from the raw data."""
    if not loc:
        return None
    section = data.get(loc[0]) if isinstance(loc[0], str) else None
    if loc[0] == "sheet" and isinstance(section, dict):
        if section.get("preset"):
            return f"sheet {section['preset']}"
        return _size_context("sheet", section)
    if loc[0] == "item" and isinstance(section, dict):
        return _size_context("item", section)
    if loc[:2] == ("pricing", "bands") and len(loc) > 2 and isinstance(section, dict):
        bands = section.get("bands")
        index = loc[2]
        if isinstance(bands, list) and isinstance(index, int) and index < len(bands):
            return _band_context(index, bands[index])
    return None


def _size_context(name: str, section: dict[str, Any]) -> str | None:
    width, height = section.get("width"), section.get("height")
    if width is None or height is None:
        return None
    return f"{name} {width}x{height}mm"


def _band_context(index: int, band: Any) -> str:
    if not isinstance(band, dict):
        return f"band {index + 1}"
    low = band.get("min_qty", "?")
    high = band.get("max_qty")
    span = f"{low}-{high}" if high is not None else f"{low}+"
    text = f"band {index + 1}: {span}"
    if band.get("label"):
        text += f" ({band['label']})"
    return text
