"""Error codes shared by the engine, the service and the CLIs.

Every failure surfaces as ``code: message`` on stderr and a process exit code:
2 for rejected input, 1 when the environment cannot supply secure randomness.
"""
from __future__ import annotations

EXIT_INVALID_REQUEST = 2
EXIT_RANDOMNESS_UNAVAILABLE = 1


class SecurePassError(ValueError):
    exit_code = EXIT_INVALID_REQUEST

    def __init__(self, code: str, message: str) -> None:
        self.code = _normalize_code(code)
        self.message = message.strip() or "unspecified error"
        super().__init__(self.message)


class RandomnessUnavailable(SecurePassError):
    """The OS CSPRNG could not supply bytes. Fatal to the request; never retried."""

    exit_code = EXIT_RANDOMNESS_UNAVAILABLE

    def __init__(self, message: str) -> None:
        super().__init__("randomness_unavailable", message)


def _normalize_code(code: str) -> str:
    out = []
    for ch in code.strip().lower():
        if ch.isalnum() or ch == "_":
            out.append(ch)
        elif ch in ("-", " ", "."):
            out.append("_")
    return "".join(out).strip("_") or "invalid_request"


def make_error(code: str, message: str) -> SecurePassError:
    return SecurePassError(code=code, message=message)


def exit_code_for(exc: BaseException) -> int:
    return getattr(exc, "exit_code", EXIT_INVALID_REQUEST)


def format_error_text(exc: BaseException, *, default_code: str = "invalid_request") -> str:
    if isinstance(exc, SecurePassError):
        return f"{exc.code}: {exc.message}"
    message = str(exc).strip() or "invalid request"
    return f"{_normalize_code(default_code)}: {message}"
