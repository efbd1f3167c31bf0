from __future__ import annotations

import random
import string

import pytest

from auth_backend.application.services.password_hashing import BcryptPasswordHasher


def _random_password(rng: random.Random) -> str:
    alphabet = string.ascii_letters + string.digits + string.punctuation + "äßж€ "
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))


def test_hash_is_self_describing_and_salted(hasher: BcryptPasswordHasher) -> None:
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert first.startswith("$2b$04$")
    assert "secret1" not in first
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_default_cost_factor_is_ten() -> None:
    assert BcryptPasswordHasher().hash("secret1").startswith("$2b$10$")


def test_verify_rejects_wrong_password(hasher: BcryptPasswordHasher) -> None:
    digest = hasher.hash("secret1")
    assert hasher.verify("secret2", digest) is False
    assert hasher.verify("", digest) is False


@pytest.mark.parametrize(
    "digest",
    ["", "plaintext", "$2b$04$short", "$2b$99$" + "a" * 53, "pbkdf2:sha256:1$abc$def", "ж"],
)
def test_verify_never_raises_on_malformed_digest(
    hasher: BcryptPasswordHasher, digest: str
) -> None:
    assert hasher.verify("secret1", digest) is False


def test_verify_handles_non_string_input(hasher: BcryptPasswordHasher) -> None:
    assert hasher.verify(None, hasher.hash("x")) is False  # type: ignore[arg-type]
    assert hasher.verify("x", None) is False  # type: ignore[arg-type]


def test_no_false_positives_across_random_pairs(hasher: BcryptPasswordHasher) -> None:
    rng = random.Random(1234)
    for _ in range(1000):
        s1 = _random_password(rng)
        s2 = _random_password(rng)
        if rng.random() < 0.2:
            # shared prefix past the bcrypt input limit
            shared = "x" * 80
            s1, s2 = shared + s1, shared + s2
        if s1 == s2:
            continue
        digest = hasher.hash(s1)
        assert hasher.verify(s1, digest)
        assert not hasher.verify(s2, digest)


def test_passwords_beyond_72_bytes_stay_distinct(hasher: BcryptPasswordHasher) -> None:
    prefix = "a" * 72
    digest = hasher.hash(prefix + "X")

    assert hasher.verify(prefix + "X", digest)
    assert not hasher.verify(prefix + "Y", digest)
    assert not hasher.verify(prefix, digest)


def test_long_multibyte_password_round_trips(hasher: BcryptPasswordHasher) -> None:
    password = "пароль€" * 40
    digest = hasher.hash(password)

    assert hasher.verify(password, digest)
    assert not hasher.verify(password[:-1], digest)
