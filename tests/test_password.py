"""비밀번호 해싱 테스트.

Password hashing tests.
"""

import pytest

from batubook.utils.exceptions import BadRequestError
from batubook.utils.password import hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert hashed.startswith("$2")
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


@pytest.mark.parametrize("password", [None, "", "   "])
def test_blank_password_rejected(password):
    with pytest.raises(BadRequestError) as exc_info:
        hash_password(password)
    assert exc_info.value.detail == "Password cannot be empty."


def test_password_longer_than_bcrypt_limit():
    """72바이트를 넘는 비밀번호도 해싱되고 모든 문자가 검증에 반영됩니다."""
    long_password = "A1!" + "x" * 97
    hashed = hash_password(long_password)
    assert verify_password(long_password, hashed)
    assert not verify_password(long_password[:-1] + "y", hashed)


def test_multibyte_password_over_limit():
    password = "Şifre#1" + "ğ" * 40
    assert len(password.encode("utf-8")) > 72
    assert verify_password(password, hash_password(password))
