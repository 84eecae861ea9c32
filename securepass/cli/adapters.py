from __future__ import annotations

import json
import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Mapping

from securepass.core.error_dialect import make_error
from securepass.core.models import (
    DEFAULT_COUNT,
    DEFAULT_LENGTH,
    MAX_COUNT,
    MAX_LENGTH,
    MIN_LENGTH,
    PasswordRequest,
)

ENV_LENGTH = "SECUREPASS_LENGTH"
ENV_COUNT = "SECUREPASS_COUNT"
ENV_CONFIG = "SECUREPASS_CONFIG"
MAX_SETTINGS_FILE_BYTES = 64 * 1024

_REQUEST_FIELDS = {field.name for field in fields(PasswordRequest)}


def _ensure_object(payload: Mapping[str, Any] | Any, label: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise make_error("invalid_request", f"{label} must be a JSON object")
    return payload


def _reject_unknown_fields(payload: Mapping[str, Any], label: str) -> None:
    unknown = sorted(set(payload.keys()) - _REQUEST_FIELDS)
    if unknown:
        raise make_error("invalid_request", f"{label} has unknown fields: {', '.join(unknown)}")


def parse_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise make_error("invalid_request", f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if raw:
            try:
                return int(raw)
            except ValueError:
                pass
    raise make_error("invalid_request", f"{field} must be an integer")


def parse_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise make_error("invalid_request", f"{field} must be a boolean")


def validate_request(request: PasswordRequest) -> PasswordRequest:
    if not MIN_LENGTH <= request.length <= MAX_LENGTH:
        raise make_error("invalid_request", f"length must be between {MIN_LENGTH} and {MAX_LENGTH}")
    if request.count <= 0:
        raise make_error("invalid_request", "count must be > 0")
    if request.count > MAX_COUNT:
        raise make_error("invalid_request", f"count must be <= {MAX_COUNT}")
    return request


def overlay_settings(
    payload: Mapping[str, Any] | Any,
    *,
    base: PasswordRequest | None = None,
    label: str = "settings",
) -> PasswordRequest:
    """Overlay the fields present in `payload` onto `base`. Bounds are not checked here."""
    data = _ensure_object(payload, label)
    _reject_unknown_fields(data, label)
    request = base if base is not None else PasswordRequest()

    updates: dict[str, Any] = {}
    for name in ("count", "length"):
        if name in data:
            updates[name] = parse_int(data[name], name)
    for name in ("use_uppercase", "use_lowercase", "use_numbers", "use_symbols"):
        if name in data:
            updates[name] = parse_bool(data[name], name)
    return replace(request, **updates)


def build_password_request(
    payload: Mapping[str, Any] | Any,
    *,
    base: PasswordRequest | None = None,
    label: str = "settings",
) -> PasswordRequest:
    return validate_request(overlay_settings(payload, base=base, label=label))


def load_settings_file(path: str) -> Mapping[str, Any]:
    p = Path(path).expanduser()
    try:
        st = p.stat()
    except FileNotFoundError as exc:
        raise make_error("invalid_request", f"settings file not found: {p}") from exc
    except OSError as exc:
        raise make_error("invalid_request", f"unable to stat settings file '{p}': {exc}") from exc

    if not p.is_file():
        raise make_error("invalid_request", f"settings path is not a file: {p}")
    if st.st_size > MAX_SETTINGS_FILE_BYTES:
        raise make_error("invalid_request", f"settings file too large: {p} ({st.st_size} bytes)")

    try:
        text = p.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeError) as exc:
        raise make_error("invalid_request", f"unable to read settings file '{p}': {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise make_error("invalid_request", f"settings file is not valid JSON: {p}") from exc
    return _ensure_object(payload, "settings")


def request_from_environment(environ: Mapping[str, str] | None = None) -> PasswordRequest:
    env = os.environ if environ is None else environ
    return PasswordRequest(
        count=parse_int(env.get(ENV_COUNT, str(DEFAULT_COUNT)), ENV_COUNT),
        length=parse_int(env.get(ENV_LENGTH, str(DEFAULT_LENGTH)), ENV_LENGTH),
    )


def resolve_settings_path(explicit: str = "", environ: Mapping[str, str] | None = None) -> str:
    # An explicit path replaces $SECUREPASS_CONFIG; the two files are never merged.
    if explicit.strip():
        return explicit.strip()
    env = os.environ if environ is None else environ
    return env.get(ENV_CONFIG, "").strip()


def layered_request(
    *,
    settings_path: str = "",
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> PasswordRequest:
    """Defaults < environment < settings file < overrides, validated once at the end."""
    request = request_from_environment(environ)
    path = resolve_settings_path(settings_path, environ)
    if path:
        request = overlay_settings(load_settings_file(path), base=request)
    if overrides:
        request = replace(request, **overrides)
    return validate_request(request)


__all__ = [
    "build_password_request",
    "layered_request",
    "load_settings_file",
    "overlay_settings",
    "parse_bool",
    "parse_int",
    "request_from_environment",
    "resolve_settings_path",
    "validate_request",
]
