"""Tests for CRC-64 checksums and building grants from query rows."""

from __future__ import annotations

import pytest

from grantdiff.grants.checksum import crc64_iso
from grantdiff.grants.rows import new_db_grant, new_user_grant

_USER_FIELDS = ["Host", "User", "Password", "Select_priv", "Insert_priv", "password_last_changed"]


class TestCrc64Iso:
    def test_standard_check_value(self) -> None:
        assert crc64_iso(b"123456789") == 0xB90956C775A41001

    def test_empty_input_is_zero(self) -> None:
        assert crc64_iso(b"") == 0

    def test_result_fits_uint64(self) -> None:
        value = crc64_iso(b"*6BB4837EB74329105EE4568DDA7DC67ED2CA2AD9")
        assert 0 < value < 2**64

    def test_different_inputs_differ(self) -> None:
        assert crc64_iso(b"secret") != crc64_iso(b"secreT")


class TestNewUserGrant:
    def test_identity_password_and_privileges(self) -> None:
        grant = new_user_grant(_USER_FIELDS, ["%", "app", "secret", "Y", "N", "2024-01-01 00:00:00"])
        assert grant.host == "%"
        assert grant.user == "app"
        assert grant.password_checksum == crc64_iso(b"secret")
        assert grant.privileges == {"Select_priv": "Y", "Insert_priv": "N"}

    def test_password_last_changed_is_ignored(self) -> None:
        a = new_user_grant(_USER_FIELDS, ["%", "app", "x", "Y", "N", "2024-01-01 00:00:00"])
        b = new_user_grant(_USER_FIELDS, ["%", "app", "x", "Y", "N", "2025-06-30 12:00:00"])
        assert a == b

    def test_identity_columns_match_case_insensitively(self) -> None:
        grant = new_user_grant(["HOST", "user", "PASSWORD"], ["h", "u", b"pw"])
        assert (grant.host, grant.user) == ("h", "u")
        assert grant.password_checksum == crc64_iso(b"pw")
        assert grant.privileges == {}

    def test_null_and_empty_password_mean_no_password(self) -> None:
        assert new_user_grant(["Host", "User", "Password"], ["h", "u", None]).password_checksum == 0
        assert new_user_grant(["Host", "User", "Password"], ["h", "u", ""]).password_checksum == 0

    def test_values_converted_to_text(self) -> None:
        grant = new_user_grant(["Host", "User", "max_connections", "ssl_cipher"], ["h", "u", 10, None])
        assert grant.privileges == {"max_connections": "10", "ssl_cipher": ""}

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="2 values for 3 fields"):
            new_user_grant(["Host", "User", "Password"], ["h", "u"])


class TestNewDbGrant:
    def test_identity_and_privileges(self) -> None:
        grant = new_db_grant(["Host", "Db", "User", "Select_priv"], ["h", "shop", "app", "Y"])
        assert (grant.host, grant.db, grant.user) == ("h", "shop", "app")
        assert grant.privileges == {"Select_priv": "Y"}

    def test_identity_columns_match_exactly(self) -> None:
        grant = new_db_grant(["Host", "Db", "User", "db"], ["h", "d", "u", "other"])
        assert grant.db == "d"
        assert grant.privileges == {"db": "other"}

    def test_bytes_values_decoded(self) -> None:
        grant = new_db_grant(["Host", "Db", "User", "Grant_priv"], [b"h", b"d", b"u", b"N"])
        assert (grant.host, grant.db, grant.user) == ("h", "d", "u")
        assert grant.privileges == {"Grant_priv": "N"}
