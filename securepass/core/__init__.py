"""Core generation engine, strength classifier, models, and service API for SecurePass."""

from __future__ import annotations


def generate_passwords(request):
    from securepass.core.password_service import generate_passwords as _generate_passwords

    return _generate_passwords(request)


def classify(password):
    from securepass.core.strength import classify as _classify

    return _classify(password)


__all__ = ["classify", "generate_passwords"]
