import pytest

from ebsite.auth.errors import ConfigurationError
from ebsite.auth.signer import Signer, sign, verify


@pytest.mark.parametrize("message", ["", "a", "0c9f3b8e-1d2a-4b6f-9e21-7f1f0f2c3d4e", "ñandú €"])
def test_sign_then_verify(message):
    sig = sign("s3cr3t", message)
    assert len(sig) == 32
    assert verify("s3cr3t", message, sig)


def test_sign_is_deterministic_and_keyed():
    assert sign("s3cr3t", "abc") == sign("s3cr3t", "abc")
    assert sign("s3cr3t", "abc") != sign("other", "abc")
    assert sign("s3cr3t", "abc") != sign("s3cr3t", "abd")


def test_known_hmac_sha256_vector():
    # RFC 4231 test case 2
    sig = sign(b"Jefe", b"what do ya want for nothing?")
    assert sig.hex() == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"


def test_every_single_bit_flip_is_rejected():
    sig = sign("s3cr3t", "session-id")
    for i in range(len(sig) * 8):
        tampered = bytearray(sig)
        tampered[i // 8] ^= 1 << (i % 8)
        assert not verify("s3cr3t", "session-id", bytes(tampered)), f"bit {i}"


def test_truncated_or_wrong_secret_is_rejected():
    sig = sign("s3cr3t", "m")
    assert not verify("s3cr3t", "m", sig[:-1])
    assert not verify("s3cr3t", "m", b"")
    assert not verify("S3CR3T", "m", sig)


@pytest.mark.parametrize("secret", [None, "", b""])
def test_missing_secret_never_passes(secret):
    with pytest.raises(ConfigurationError):
        sign(secret, "m")
    with pytest.raises(ConfigurationError):
        verify(secret, "m", b"\x00" * 32)
    with pytest.raises(ConfigurationError):
        Signer(secret)


def test_signer_wraps_secret():
    signer = Signer("s3cr3t")
    assert signer.sign("x") == sign("s3cr3t", "x")
    assert signer.verify("x", sign("s3cr3t", "x"))
    assert not signer.verify("y", sign("s3cr3t", "x"))
