import pytest

from tronkit.keys import (
    KeyPair,
    from_mnemonic_seed_and_passphrase,
    mnemonic_to_seed,
)

MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon about"
)


def test_mnemonic_to_private_key():
    pair = from_mnemonic_seed_and_passphrase(MNEMONIC, "", 0)
    assert pair.private_key.hex() == (
        "b5a4cea271ff424d7c31dc12a3e43e401df7a40d7412a15750f3f0b6b5449a28"
    )


def test_mnemonic_seed_vector():
    seed = mnemonic_to_seed(MNEMONIC, "TREZOR")
    assert seed.hex() == (
        "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e5349553"
        "1f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
    )


def test_index_changes_key():
    first = from_mnemonic_seed_and_passphrase(MNEMONIC, "", 0)
    second = from_mnemonic_seed_and_passphrase(MNEMONIC, "", 1)
    assert first.private_key != second.private_key


def test_passphrase_changes_key():
    plain = from_mnemonic_seed_and_passphrase(MNEMONIC, "", 0)
    salted = from_mnemonic_seed_and_passphrase(MNEMONIC, "extra", 0)
    assert plain.private_key != salted.private_key


def test_generator_point_public_key():
    pair = KeyPair.from_private_bytes((1).to_bytes(32, "big"))
    assert pair.public_key_compressed().hex() == (
        "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )


def test_public_key_forms_agree():
    pair = from_mnemonic_seed_and_passphrase(MNEMONIC, "", 0)
    compressed = pair.public_key_compressed()
    uncompressed = pair.public_key_uncompressed()
    assert len(compressed) == 33
    assert len(uncompressed) == 65
    assert uncompressed[0] == 4
    assert compressed[1:] == uncompressed[1:33]
    parity = uncompressed[-1] & 1
    assert compressed[0] == 2 + parity


def test_dump_hex_strings():
    pair = from_mnemonic_seed_and_passphrase(MNEMONIC, "", 0)
    dump = pair.dump()
    assert dump.private_key == "0x" + pair.private_key.hex()
    assert dump.public_key_compressed == "0x" + pair.public_key_compressed().hex()
    assert dump.public_key == "0x" + pair.public_key_uncompressed().hex()


def test_short_private_bytes_are_padded():
    pair = KeyPair.from_private_bytes(b"\x05")
    assert pair.private_key == b"\x00" * 31 + b"\x05"


def test_zero_private_key_rejected():
    with pytest.raises(ValueError):
        KeyPair.from_private_bytes(b"\x00" * 32)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        from_mnemonic_seed_and_passphrase(MNEMONIC, "", -1)