"""
CLI Tests
=========

Tests for the sctapewave command-line tool.
"""

import pytest
from click.testing import CliRunner

from sc_tapewave import config as tape_config
from sc_tapewave.cli.sctapewave import main
from sc_tapewave.config import TapeConfig
from sc_tapewave.riff import WAVE_HEADER_SIZE, parse_wave_header


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def program_file(tmp_path):
    """A one-byte program file containing $AB."""
    path = tmp_path / "test.bin"
    path.write_bytes(b"\xAB")
    return path


@pytest.fixture(autouse=True)
def short_tape(monkeypatch):
    """Short leaders so CLI tests stay fast."""
    config = TapeConfig(leader_bits=16, header_gap_ms=10)
    monkeypatch.setattr("sc_tapewave.cli.sctapewave.get_config", lambda: config)


# =============================================================================
# CLI Tests
# =============================================================================

class TestCLI:
    """Tests for the sctapewave CLI."""

    def test_help(self, runner: CliRunner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "SC-3000" in result.output

    def test_version(self, runner: CliRunner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_machine_code(self, runner: CliRunner, program_file, tmp_path, tape_decoder):
        output = tmp_path / "test.wav"
        result = runner.invoke(
            main, ["--machine-code", "8000", "TEST", str(program_file), str(output)]
        )

        assert result.exit_code == 0, result.output
        assert "Created" in result.output

        data = output.read_bytes()
        riff_size, data_size = parse_wave_header(data)
        assert riff_size == len(data) - 8
        assert data_size == len(data) - 44

        tape = tape_decoder(data[WAVE_HEADER_SIZE:])
        assert tape.name == b"TEST            "
        assert tape.start_address == 0x8000
        assert tape.data.payload == b"\xAB"

    @pytest.mark.parametrize("address", ["0x9000", "$9000", "9000"])
    def test_address_prefixes(self, runner, program_file, tmp_path, tape_decoder, address):
        output = tmp_path / "prefix.wav"
        result = runner.invoke(
            main, ["--machine-code", address, "P", str(program_file), str(output)]
        )
        assert result.exit_code == 0, result.output
        tape = tape_decoder(output.read_bytes()[WAVE_HEADER_SIZE:])
        assert tape.start_address == 0x9000

    def test_verbose(self, runner: CliRunner, program_file, tmp_path):
        output = tmp_path / "test.wav"
        result = runner.invoke(
            main, ["-v", "--machine-code", "c000", "GAME", str(program_file), str(output)]
        )
        assert result.exit_code == 0, result.output
        assert "Start address: $C000" in result.output
        assert "Machine code" in result.output

    def test_basic_not_implemented(self, runner: CliRunner, program_file, tmp_path):
        output = tmp_path / "basic.wav"
        result = runner.invoke(main, ["--basic", "PROG", str(program_file), str(output)])

        assert result.exit_code == 1
        assert "not yet implemented" in result.output
        assert not output.exists()

    def test_address_too_high(self, runner: CliRunner, program_file, tmp_path):
        output = tmp_path / "high.wav"
        result = runner.invoke(
            main, ["--machine-code", "10000", "X", str(program_file), str(output)]
        )
        assert result.exit_code == 1
        assert "too high" in result.output
        assert not output.exists()

    def test_invalid_address(self, runner: CliRunner, program_file, tmp_path):
        result = runner.invoke(
            main, ["--machine-code", "zz", "X", str(program_file), str(tmp_path / "a.wav")]
        )
        assert result.exit_code == 2

    def test_no_mode(self, runner: CliRunner, program_file, tmp_path):
        result = runner.invoke(main, ["X", str(program_file), str(tmp_path / "a.wav")])
        assert result.exit_code == 2

    def test_both_modes(self, runner: CliRunner, program_file, tmp_path):
        result = runner.invoke(
            main,
            ["--machine-code", "8000", "--basic", "X", str(program_file), str(tmp_path / "a.wav")],
        )
        assert result.exit_code == 2

    def test_missing_arguments(self, runner: CliRunner):
        result = runner.invoke(main, ["--machine-code", "8000", "X"])
        assert result.exit_code == 2

    def test_bad_extension(self, runner: CliRunner, program_file, tmp_path):
        output = tmp_path / "test.raw"
        result = runner.invoke(
            main, ["--machine-code", "8000", "X", str(program_file), str(output)]
        )
        assert result.exit_code == 2
        assert ".wav" in result.output
        assert not output.exists()

    def test_uppercase_extension(self, runner: CliRunner, program_file, tmp_path):
        output = tmp_path / "TEST.WAV"
        result = runner.invoke(
            main, ["--machine-code", "8000", "X", str(program_file), str(output)]
        )
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_missing_input(self, runner: CliRunner, tmp_path):
        output = tmp_path / "out.wav"
        result = runner.invoke(
            main, ["--machine-code", "8000", "X", str(tmp_path / "nope.bin"), str(output)]
        )
        assert result.exit_code == 2
        assert not output.exists()

    def test_program_too_large(self, runner: CliRunner, tmp_path):
        big = tmp_path / "big.bin"
        big.write_bytes(bytes(65536))
        output = tmp_path / "big.wav"
        result = runner.invoke(main, ["--machine-code", "0", "BIG", str(big), str(output)])

        assert result.exit_code == 1
        assert "too large" in result.output
        assert not output.exists()

    def test_max_program(self, runner: CliRunner, tmp_path):
        big = tmp_path / "max.bin"
        big.write_bytes(bytes(65535))
        output = tmp_path / "max.wav"
        result = runner.invoke(main, ["--machine-code", "0", "MAX", str(big), str(output)])

        assert result.exit_code == 0, result.output
        _, data_size = parse_wave_header(output.read_bytes())
        assert data_size == output.stat().st_size - 44

    def test_timing_environment_ignored(self, runner, program_file, tmp_path, monkeypatch, tape_decoder):
        """Timing variables cannot strip the leader tone from a tape."""
        monkeypatch.setattr("sc_tapewave.cli.sctapewave.get_config", tape_config.get_config)
        monkeypatch.setenv("SC_TAPEWAVE_LEADER_BITS", "0")
        monkeypatch.setenv("SC_TAPEWAVE_HEADER_GAP_MS", "0")
        tape_config.reset_config()

        output = tmp_path / "full.wav"
        result = runner.invoke(
            main, ["--machine-code", "8000", "T", str(program_file), str(output)]
        )

        assert result.exit_code == 0, result.output
        tape = tape_decoder(output.read_bytes()[WAVE_HEADER_SIZE:])
        assert tape.header.leader_bits == 3600
        assert tape.data.leader_bits == 3600
        assert tape.gap == 19200

    @pytest.mark.parametrize("address", ["8_000", "+8000", " 8000", "8000 ", "0x", "$"])
    def test_malformed_address(self, runner: CliRunner, program_file, tmp_path, address):
        output = tmp_path / "bad.wav"
        result = runner.invoke(
            main, ["--machine-code", address, "X", str(program_file), str(output)]
        )
        assert result.exit_code == 2
        assert not output.exists()

    def test_dot_wav_output_name(self, runner: CliRunner, program_file, tmp_path):
        output = tmp_path / ".wav"
        result = runner.invoke(
            main, ["--machine-code", "8000", "X", str(program_file), str(output)]
        )
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_write_failure(self, runner: CliRunner, program_file, tmp_path, monkeypatch):
        """An I/O error mid-encode exits 1 and removes the output."""
        def failing_encode(program, stream, config=None):
            stream.write(b"RIFF")
            raise OSError(28, "No space left on device")

        monkeypatch.setattr("sc_tapewave.riff.encoder.encode_program", failing_encode)
        output = tmp_path / "full.wav"
        result = runner.invoke(
            main, ["--machine-code", "8000", "X", str(program_file), str(output)]
        )

        assert result.exit_code == 1
        assert "No space left on device" in result.output
        assert not output.exists()
