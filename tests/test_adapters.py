from __future__ import annotations

import json
import shutil
import unittest
import uuid
from pathlib import Path

from securepass.cli.adapters import (
    MAX_SETTINGS_FILE_BYTES,
    build_password_request,
    layered_request,
    load_settings_file,
    overlay_settings,
    parse_bool,
    parse_int,
    request_from_environment,
    resolve_settings_path,
    validate_request,
)
from securepass.core.error_dialect import SecurePassError
from securepass.core.models import PasswordRequest


class AdapterTests(unittest.TestCase):
    @staticmethod
    def _case_root() -> Path:
        root = Path(".tmp_test_settings") / uuid.uuid4().hex
        root.mkdir(parents=True, exist_ok=True)
        return root.resolve()

    def test_build_password_request_maps_fields(self) -> None:
        request = build_password_request(
            {"count": "3", "length": 24, "use_symbols": "no", "use_numbers": True},
        )
        self.assertEqual(request.count, 3)
        self.assertEqual(request.length, 24)
        self.assertFalse(request.use_symbols)
        self.assertTrue(request.use_numbers)
        self.assertTrue(request.use_uppercase)

    def test_build_password_request_overlays_base(self) -> None:
        base = PasswordRequest(count=2, length=30, use_lowercase=False)
        request = build_password_request({"length": 10}, base=base)
        self.assertEqual(request, PasswordRequest(count=2, length=10, use_lowercase=False))

    def test_rejects_unknown_field(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown fields: bad_field"):
            build_password_request({"count": 1, "bad_field": "x"})

    def test_payload_must_be_object(self) -> None:
        with self.assertRaisesRegex(ValueError, "must be a JSON object"):
            build_password_request(["not", "an", "object"])

    def test_length_bounds(self) -> None:
        validate_request(PasswordRequest(length=6))
        validate_request(PasswordRequest(length=50))
        for length in (5, 51, 0, -1):
            with self.assertRaisesRegex(ValueError, "length must be between 6 and 50"):
                validate_request(PasswordRequest(length=length))

    def test_count_bounds(self) -> None:
        with self.assertRaisesRegex(ValueError, "count must be > 0"):
            validate_request(PasswordRequest(count=0))
        with self.assertRaisesRegex(ValueError, "count must be <= 1000"):
            validate_request(PasswordRequest(count=1001))

    def test_scalar_parsers(self) -> None:
        self.assertEqual(parse_int(" 7 ", "length"), 7)
        self.assertTrue(parse_bool("ON", "use_symbols"))
        self.assertFalse(parse_bool("0", "use_symbols"))
        with self.assertRaisesRegex(ValueError, "length must be an integer"):
            parse_int(True, "length")
        with self.assertRaisesRegex(ValueError, "length must be an integer"):
            parse_int("ten", "length")
        with self.assertRaisesRegex(ValueError, "use_symbols must be a boolean"):
            parse_bool(1, "use_symbols")

    def test_errors_carry_invalid_request_code(self) -> None:
        with self.assertRaises(SecurePassError) as ctx:
            build_password_request({"length": 100})
        self.assertEqual(ctx.exception.code, "invalid_request")

    def test_settings_file_round_trip(self) -> None:
        case_root = self._case_root()
        try:
            path = case_root / "settings.json"
            path.write_text(json.dumps({"length": 32, "use_symbols": False}), encoding="utf-8")
            payload = load_settings_file(str(path))
            request = build_password_request(payload)
            self.assertEqual(request.length, 32)
            self.assertFalse(request.use_symbols)
        finally:
            shutil.rmtree(case_root, ignore_errors=True)

    def test_settings_file_errors(self) -> None:
        case_root = self._case_root()
        try:
            with self.assertRaisesRegex(ValueError, "not found"):
                load_settings_file(str(case_root / "missing.json"))
            with self.assertRaisesRegex(ValueError, "not a file"):
                load_settings_file(str(case_root))

            broken = case_root / "broken.json"
            broken.write_text("{length: 12", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "not valid JSON"):
                load_settings_file(str(broken))

            listing = case_root / "list.json"
            listing.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "must be a JSON object"):
                load_settings_file(str(listing))

            oversize = case_root / "oversize.json"
            with oversize.open("wb") as handle:
                handle.truncate(MAX_SETTINGS_FILE_BYTES + 1)
            with self.assertRaisesRegex(ValueError, "too large"):
                load_settings_file(str(oversize))
        finally:
            shutil.rmtree(case_root, ignore_errors=True)

    def test_request_from_environment(self) -> None:
        self.assertEqual(request_from_environment({}), PasswordRequest())
        request = request_from_environment({"SECUREPASS_LENGTH": "20", "SECUREPASS_COUNT": "4"})
        self.assertEqual((request.length, request.count), (20, 4))
        with self.assertRaisesRegex(ValueError, "SECUREPASS_LENGTH must be an integer"):
            request_from_environment({"SECUREPASS_LENGTH": "long"})

    def test_environment_does_not_load_settings_file_by_itself(self) -> None:
        request = request_from_environment({"SECUREPASS_CONFIG": "missing.json"})
        self.assertEqual(request, PasswordRequest())

    def test_overlay_settings_skips_bounds_check(self) -> None:
        request = overlay_settings({"length": 100})
        self.assertEqual(request.length, 100)
        with self.assertRaisesRegex(ValueError, "length must be between 6 and 50"):
            build_password_request({"length": 100})

    def test_resolve_settings_path_prefers_explicit(self) -> None:
        env = {"SECUREPASS_CONFIG": " env.json "}
        self.assertEqual(resolve_settings_path("cli.json", env), "cli.json")
        self.assertEqual(resolve_settings_path("", env), "env.json")
        self.assertEqual(resolve_settings_path("", {}), "")

    def test_layered_request_applies_environment_settings_file(self) -> None:
        case_root = self._case_root()
        try:
            path = case_root / "settings.json"
            path.write_text(json.dumps({"use_uppercase": False}), encoding="utf-8")
            request = layered_request(environ={"SECUREPASS_LENGTH": "9", "SECUREPASS_CONFIG": str(path)})
            self.assertEqual(request.length, 9)
            self.assertFalse(request.use_uppercase)
        finally:
            shutil.rmtree(case_root, ignore_errors=True)

    def test_layered_request_explicit_path_replaces_stale_environment_path(self) -> None:
        case_root = self._case_root()
        try:
            path = case_root / "settings.json"
            path.write_text(json.dumps({"length": 11}), encoding="utf-8")
            env = {"SECUREPASS_CONFIG": str(case_root / "missing.json")}
            request = layered_request(settings_path=str(path), environ=env)
            self.assertEqual(request.length, 11)
            with self.assertRaisesRegex(ValueError, "settings file not found"):
                layered_request(environ=env)
        finally:
            shutil.rmtree(case_root, ignore_errors=True)

    def test_layered_request_validates_only_the_final_request(self) -> None:
        case_root = self._case_root()
        try:
            path = case_root / "settings.json"
            path.write_text(json.dumps({"use_symbols": False}), encoding="utf-8")
            env = {"SECUREPASS_LENGTH": "100"}
            request = layered_request(settings_path=str(path), overrides={"length": 20}, environ=env)
            self.assertEqual(request.length, 20)
            self.assertFalse(request.use_symbols)
            with self.assertRaisesRegex(ValueError, "length must be between 6 and 50"):
                layered_request(settings_path=str(path), environ=env)
        finally:
            shutil.rmtree(case_root, ignore_errors=True)


if __name__ == "__main__":
    unittest.main()
