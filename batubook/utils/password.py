"""비밀번호 해싱 유틸리티.

Password hashing helpers built on bcrypt.
Only bcrypt hashes are ever persisted on the users table.
"""

import base64
import hashlib

import bcrypt

from batubook.utils.exceptions import BadRequestError

# bcrypt 입력 한도 (bcrypt reads at most 72 bytes of input)
BCRYPT_MAX_BYTES: int = 72


def bcrypt_input(password: str) -> bytes:
    """bcrypt 에 전달할 바이트열을 만듭니다.

    Passwords longer than ``BCRYPT_MAX_BYTES`` once encoded are reduced to
    the base64 of their SHA-256 digest (44 bytes), so every character
    still counts.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        return base64.b64encode(hashlib.sha256(encoded).digest())
    return encoded


def hash_password(password: str | None) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password with a fresh bcrypt salt.

    Args:
        password: 평문 비밀번호 (Plain text password)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash, ~60 chars)

    Raises:
        BadRequestError: 비밀번호가 비어 있을 때 (Password is missing or blank)
    """
    if password is None or not password.strip():
        raise BadRequestError("Password cannot be empty.")
    return bcrypt.hashpw(bcrypt_input(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호가 저장된 해시와 일치하는지 확인합니다.

    Check a plain text password against a stored bcrypt hash.
    """
    return bcrypt.checkpw(bcrypt_input(plain_password), hashed_password.encode("utf-8"))
