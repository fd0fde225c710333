"""Tests for the rc6 command-line interface."""

import json

import pytest
from click.testing import CliRunner

from rc6.cli import main


ANH_CT_HEX = "3e3f9049a31f3698c7154ab215032ddb"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestDemo:

    def test_default_run(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0, result.output
        assert "Original Text: Anh" in result.output
        assert "Key: ABC" in result.output
        assert "HEX: 3E 3F 90 49 A3 1F 36 98 C7 15 4A B2 15 03 2D DB" in result.output
        assert "Decrypted Text: Anh" in result.output
        assert "Decryption successful!" in result.output

    def test_word_dump(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo"])
        assert "Word 0: 6843969 (0x00686E41)" in result.output
        assert "32-bit Words (Little Endian):" in result.output

    def test_longer_text(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo", "--key", "secret", "--text", "a much longer message"])
        assert result.exit_code == 0
        assert "Decrypted Text: a much longer message" in result.output

    def test_empty_text_still_one_block(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo", "--text", ""])
        assert result.exit_code == 0
        assert "Word 3:" in result.output


class TestEncryptDecrypt:

    def test_encrypt_text(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "--key", "ABC", "--text", "Anh"])
        assert result.exit_code == 0
        assert result.output.strip() == ANH_CT_HEX

    def test_encrypt_hex(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "--key-hex", "414243", "--hex", "416e68"])
        assert result.output.strip() == ANH_CT_HEX

    def test_decrypt_raw(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["decrypt", "--key", "ABC", "--hex", ANH_CT_HEX])
        assert result.exit_code == 0
        assert result.output.strip() == "416e68" + "00" * 13

    def test_decrypt_zero_padding_as_text(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main,
            ["decrypt", "--key", "ABC", "--hex", ANH_CT_HEX, "--padding", "zero", "--as-text"],
        )
        assert result.output.strip() == "Anh"

    def test_pkcs7_round_trip(self, runner: CliRunner) -> None:
        enc = runner.invoke(
            main, ["encrypt", "--key", "k", "--text", "sixteen bytes!!!", "--padding", "pkcs7"]
        )
        ct_hex = enc.output.strip()
        assert len(ct_hex) == 64

        dec = runner.invoke(
            main, ["decrypt", "--key", "k", "--hex", ct_hex, "--padding", "PKCS7", "--as-text"]
        )
        assert dec.exit_code == 0
        assert dec.output.strip() == "sixteen bytes!!!"

    def test_rounds_option(self, runner: CliRunner) -> None:
        enc = runner.invoke(main, ["encrypt", "--key", "ABC", "--text", "Anh", "--rounds", "12"])
        assert enc.exit_code == 0
        assert enc.output.strip() != ANH_CT_HEX
        dec = runner.invoke(
            main,
            ["decrypt", "--key", "ABC", "--hex", enc.output.strip(), "--rounds", "12",
             "--padding", "zero", "--as-text"],
        )
        assert dec.output.strip() == "Anh"

    def test_verbose_trace(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "--key", "ABC", "--text", "Anh", "-v"])
        assert result.exit_code == 0
        assert "RC6-32/20 Encryption" in result.output
        assert "E B0000 R20  round" in result.output
        assert f"Ciphertext: {ANH_CT_HEX}" in result.output

    def test_trace_file(self, runner: CliRunner) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(
                main, ["encrypt", "--key", "ABC", "--text", "Anh", "--trace", "trace.jsonl"]
            )
            assert result.output.strip() == ANH_CT_HEX
            with open("trace.jsonl") as f:
                rows = [json.loads(line) for line in f]
        assert len(rows) == 22
        assert rows[-1]["operation"] == "whiten_out"


class TestErrors:

    def test_partial_block_ciphertext(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["decrypt", "--key", "ABC", "--hex", "00" * 15])
        assert result.exit_code == 1
        assert "Error: Ciphertext length must be a multiple of 16 bytes" in result.output

    def test_bad_padding(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["decrypt", "--key", "ABC", "--hex", ANH_CT_HEX, "--padding", "pkcs7"]
        )
        assert result.exit_code == 1
        assert "Error: Invalid pkcs7 padding" in result.output

    def test_bad_rounds(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "--text", "x", "--rounds", "0"])
        assert result.exit_code == 1
        assert "rounds must be 1..255" in result.output

    def test_bad_hex(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "--hex", "zz"])
        assert result.exit_code == 2
        assert "Invalid input hex" in result.output

    def test_missing_input(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "--key", "ABC"])
        assert result.exit_code == 2

    def test_both_key_forms(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["subkeys", "--key", "ABC", "--key-hex", "414243"])
        assert result.exit_code == 2


class TestSubkeys:

    def test_abc(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["subkeys", "--key", "ABC"])
        assert result.exit_code == 0
        assert "Rounds: 20, subkeys: 44" in result.output
        assert "S[ 0] = 0x46e9f5ee" in result.output
        assert "S[43] = 0xde705f84" in result.output

    def test_empty_key(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["subkeys", "--key-hex", ""])
        assert result.exit_code == 0
        assert "Key: (empty) (0 bytes)" in result.output
        assert "S[ 0] = 0xe5dce4ac" in result.output


class TestValidate:

    def test_passes(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["validate", "--n", "10", "--seed", "42", "-v"])
        assert result.exit_code == 0, result.output
        assert "Known-answer tests: 9/9 passed" in result.output
        assert "Random round trips: 10/10 passed" in result.output
        assert "VALIDATION PASSED" in result.output

    def test_unseeded(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["validate", "--n", "3"])
        assert result.exit_code == 0

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])
        assert "0.1.0" in result.output
