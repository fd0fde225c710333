"""Tests for CipherConfig."""

import pytest

from rc6.config import BLOCK_SIZE, P32, Q32, CipherConfig


class TestCipherConfig:

    def test_defaults(self) -> None:
        config = CipherConfig()
        assert config.rounds == 20
        assert config.subkey_count == 44
        assert config.block_size == BLOCK_SIZE == 16
        assert config.word_bits == 32

    def test_subkey_count_follows_rounds(self) -> None:
        assert CipherConfig(rounds=12).subkey_count == 28
        assert CipherConfig(rounds=1).subkey_count == 6

    @pytest.mark.parametrize("rounds", [0, -1, 256])
    def test_rounds_out_of_range(self, rounds: int) -> None:
        with pytest.raises(ValueError, match="rounds must be 1..255"):
            CipherConfig(rounds=rounds)

    @pytest.mark.parametrize("rounds", ["20", 20.0, True])
    def test_rounds_must_be_int(self, rounds) -> None:
        with pytest.raises(ValueError, match="rounds must be an integer"):
            CipherConfig(rounds=rounds)

    def test_frozen(self) -> None:
        config = CipherConfig()
        with pytest.raises(AttributeError):
            config.rounds = 12

    def test_magic_constants(self) -> None:
        assert P32 == 0xB7E15163
        assert Q32 == 0x9E3779B9
