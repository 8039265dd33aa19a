from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from cargo_project.errors import ConfigInvalid, IoFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _read_bytes(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise IoFailure(path, exc.strerror or str(exc)) from exc


def _parse(path: Path, raw: bytes, model: type[ModelT]) -> ModelT:
    try:
        data: dict[str, Any] = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigInvalid(path, f"not valid UTF-8: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigInvalid(path, f"invalid TOML: {exc}") from exc
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigInvalid(path, _summarize(exc)) from exc


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def load_document(path: Path, model: type[ModelT]) -> ModelT:
    """Read a TOML file and return it validated as *model*.

    Raises ``IoFailure`` if the file cannot be read and ``ConfigInvalid`` if it
    is not TOML or does not have the shape of *model*.
    """
    logger.debug("Loading %s from %s", model.__name__, path)
    return _parse(path, _read_bytes(path), model)


def probe_document(path: Path, model: type[ModelT]) -> ModelT | None:
    """Like :func:`load_document`, but return ``None`` when the shape doesn't fit.

    Read failures still raise ``IoFailure``.
    """
    raw = _read_bytes(path)
    try:
        return _parse(path, raw, model)
    except ConfigInvalid as exc:
        logger.debug("%s is not a %s: %s", path, model.__name__, exc.reason)
        return None
