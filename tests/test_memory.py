"""Tests for program image loading."""

import pytest
from c8d import (
    load_program, load_rom, OddBytePolicy, OddLengthImageError, AddressRangeError, ImageAccessError,
    PROGRAM_START,
)

from conftest import write_rom


class TestPairing:
    """Test byte pairing and address assignment."""

    def test_pairs_and_addresses(self, quiet_logger):
        program = load_program(bytes([0x61, 0xAB, 0xD1, 0x23]), base=0x200, logger=quiet_logger)

        assert list(program) == [(0x200, 0x61AB), (0x202, 0xD123)]

    def test_default_base(self, quiet_logger):
        program = load_program(b"\x00\xe0", logger=quiet_logger)

        assert program.base == PROGRAM_START
        assert list(program) == [(0x200, 0x00E0)]

    def test_custom_base(self, quiet_logger):
        program = load_program(b"\x12\x34\x56\x78", base=0x600, logger=quiet_logger)

        assert [address for address, _ in program] == [0x600, 0x602]

    def test_empty_image(self, quiet_logger):
        program = load_program(b"", logger=quiet_logger)

        assert len(program) == 0
        assert list(program) == []

    def test_restartable(self, quiet_logger):
        program = load_program(b"\x61\xab\xd1\x23", logger=quiet_logger)

        assert list(program) == list(program)

    def test_addresses_array(self, quiet_logger):
        program = load_program(bytes(6), logger=quiet_logger)

        assert program.addresses().tolist() == [0x200, 0x202, 0x204]

    def test_negative_base(self, quiet_logger):
        with pytest.raises(ValueError):
            load_program(b"\x00\xe0", base=-2, logger=quiet_logger)


class TestAddressRange:
    """Test that every address fits in four hex digits."""

    def test_image_ending_at_top(self, quiet_logger):
        program = load_program(b"\x00\xe0\x00\xee", base=0xFFFC, logger=quiet_logger)

        assert list(program) == [(0xFFFC, 0x00E0), (0xFFFE, 0x00EE)]

    def test_image_past_top(self, quiet_logger):
        with pytest.raises(AddressRangeError) as excinfo:
            load_program(b"\x00\xe0\x00\xee", base=0xFFFE, logger=quiet_logger)

        assert excinfo.value.base == 0xFFFE
        assert excinfo.value.size == 4

    def test_padding_counts_toward_size(self, quiet_logger):
        with pytest.raises(AddressRangeError):
            load_program(b"\x00\xe0\x12", base=0xFFFC, logger=quiet_logger)

    def test_base_beyond_top(self, quiet_logger):
        with pytest.raises(AddressRangeError):
            load_program(b"", base=0x10000, logger=quiet_logger)


class TestOddLength:
    """Test each policy for a trailing unpaired byte."""

    def test_pad_is_default(self, quiet_logger, log_stream):
        program = load_program(b"\x61\xab\x12", logger=quiet_logger)

        assert list(program) == [(0x200, 0x61AB), (0x202, 0x1200)]
        assert "WARNING" in log_stream.getvalue()

    def test_drop(self, quiet_logger, log_stream):
        program = load_program(b"\x61\xab\x12", policy=OddBytePolicy.DROP, logger=quiet_logger)

        assert list(program) == [(0x200, 0x61AB)]
        assert "dropping" in log_stream.getvalue()

    def test_reject(self, quiet_logger):
        with pytest.raises(OddLengthImageError) as excinfo:
            load_program(b"\x61\xab\x12", policy=OddBytePolicy.REJECT, logger=quiet_logger)

        assert excinfo.value.size == 3

    def test_policy_from_string(self, quiet_logger):
        with pytest.raises(OddLengthImageError):
            load_program(b"\x12", policy="reject", logger=quiet_logger)

    def test_single_byte_padded(self, quiet_logger):
        program = load_program(b"\xff", logger=quiet_logger)

        assert list(program) == [(0x200, 0xFF00)]


class TestBatchFields:
    """Test vectorized views over the whole image."""

    def test_fields(self, quiet_logger):
        program = load_program(bytes([0x61, 0xAB, 0xD1, 0x23]), logger=quiet_logger)

        fields = program.fields()

        assert fields.family.tolist() == [0x6, 0xD]
        assert fields.nn.tolist() == [0xAB, 0x23]

    def test_family_counts(self, quiet_logger):
        program = load_program(bytes([0x61, 0xAB, 0x62, 0x00, 0xF1, 0x65]), logger=quiet_logger)

        counts = program.family_counts().tolist()

        assert len(counts) == 16
        assert counts[0x6] == 2
        assert counts[0xF] == 1
        assert sum(counts) == 3


class TestLoadRom:
    """Test reading images from disk."""

    def test_load_rom(self, tmp_path, quiet_logger):
        path = write_rom(tmp_path, [0x00, 0xE0, 0x12, 0x00])

        program = load_rom(str(path), logger=quiet_logger)

        assert list(program) == [(0x200, 0x00E0), (0x202, 0x1200)]

    def test_missing_file(self, tmp_path, quiet_logger):
        path = tmp_path / "missing.ch8"

        with pytest.raises(ImageAccessError) as excinfo:
            load_rom(str(path), logger=quiet_logger)

        assert excinfo.value.path == str(path)
        assert isinstance(excinfo.value.cause, FileNotFoundError)
        assert str(path) in str(excinfo.value)
