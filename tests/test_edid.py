"""Tests for EDID decoding and DRM connector discovery."""

import random

import pytest

from quickfetch.edid import (
    EDID_HEADER,
    connector_resolutions,
    decode_resolution,
    format_resolution,
    resolution_label,
)


def add_connector(drm_root, name, status="connected", edid=None):
    """Create a fake DRM connector directory."""
    path = drm_root / name
    path.mkdir(parents=True)
    (path / "status").write_text(f"{status}\n")
    if edid is not None:
        (path / "edid").write_bytes(edid)
    return path


class TestDecodeResolution:
    """Tests for decode_resolution."""

    @pytest.mark.parametrize(
        ("horizontal", "vertical"),
        [(1920, 1080), (2560, 1440), (3840, 2160), (1, 1), (4095, 4095), (256, 255)],
    )
    def test_round_trip(self, make_edid, horizontal, vertical):
        """Test encoded dimensions decode back exactly."""
        assert decode_resolution(make_edid(horizontal, vertical)) == (horizontal, vertical)

    def test_round_trip_random(self, make_edid):
        """Test a random sample across the full 12-bit range."""
        rng = random.Random(1234)
        for _ in range(500):
            horizontal = rng.randint(1, 4095)
            vertical = rng.randint(1, 4095)
            assert decode_resolution(make_edid(horizontal, vertical)) == (horizontal, vertical)

    def test_longer_block_is_accepted(self, make_edid):
        """Test extension blocks after the base block are ignored."""
        assert decode_resolution(make_edid(1920, 1200) + bytes(128)) == (1920, 1200)

    def test_short_buffer_is_absent(self, make_edid):
        """Test a buffer shorter than 128 bytes is rejected."""
        assert decode_resolution(make_edid(1920, 1080)[:127]) is None

    def test_empty_buffer_is_absent(self):
        """Test an empty buffer is rejected."""
        assert decode_resolution(b"") is None

    def test_bad_header_is_absent(self, make_edid):
        """Test a block without the fixed header is rejected."""
        data = bytearray(make_edid(1920, 1080))
        data[0] = 0x01
        assert decode_resolution(bytes(data)) is None

    def test_zero_dimension_is_absent(self, make_edid):
        """Test a zero width or height is rejected."""
        assert decode_resolution(make_edid(0, 1080)) is None
        assert decode_resolution(make_edid(1920, 0)) is None

    def test_random_garbage_never_raises(self):
        """Test arbitrary bytes never raise."""
        rng = random.Random(99)
        for length in (0, 1, 8, 127, 128, 256):
            data = bytes(rng.randrange(256) for _ in range(length))
            decode_resolution(data)
            decode_resolution(EDID_HEADER + data)


def test_format_resolution():
    """Test the WxH label format."""
    assert format_resolution(1920, 1080) == "1920x1080"


class TestConnectors:
    """Tests for connector_resolutions and resolution_label."""

    def test_connected_displays_in_connector_order(self, tmp_path, make_edid):
        """Test every connected connector is decoded and sorted by name."""
        add_connector(tmp_path, "card0-HDMI-A-1", edid=make_edid(2560, 1440))
        add_connector(tmp_path, "card0-DP-1", edid=make_edid(1920, 1080))

        assert connector_resolutions(tmp_path) == ["1920x1080", "2560x1440"]
        assert resolution_label(tmp_path) == "1920x1080, 2560x1440"

    def test_disconnected_and_non_connector_entries_skipped(self, tmp_path, make_edid):
        """Test disconnected outputs and plain card directories are ignored."""
        add_connector(tmp_path, "card0-DP-2", status="disconnected", edid=make_edid(800, 600))
        add_connector(tmp_path, "card0", edid=make_edid(640, 480))
        add_connector(tmp_path, "renderD128", edid=make_edid(640, 480))
        add_connector(tmp_path, "card0-eDP-1", edid=make_edid(1920, 1200))

        assert connector_resolutions(tmp_path) == ["1920x1200"]

    def test_invalid_edid_does_not_block_others(self, tmp_path, make_edid):
        """Test one bad descriptor is skipped while others decode."""
        add_connector(tmp_path, "card0-DP-1", edid=b"\x00" * 128)
        add_connector(tmp_path, "card0-DP-2", edid=b"")
        add_connector(tmp_path, "card0-DP-3", edid=make_edid(3840, 2160))

        assert connector_resolutions(tmp_path) == ["3840x2160"]

    def test_undecodable_status_is_skipped(self, tmp_path, make_edid):
        """Test a status file with invalid UTF-8 is treated as not connected."""
        bad = add_connector(tmp_path, "card0-DP-1", edid=make_edid(800, 600))
        (bad / "status").write_bytes(b"\xffconnected\n")
        add_connector(tmp_path, "card0-DP-2", edid=make_edid(1280, 1024))

        assert connector_resolutions(tmp_path) == ["1280x1024"]

    def test_connector_without_edid_file(self, tmp_path):
        """Test a connected output lacking an edid file is skipped."""
        add_connector(tmp_path, "card0-Virtual-1")

        assert connector_resolutions(tmp_path) == []

    def test_missing_root_is_unknown(self, tmp_path):
        """Test a missing DRM directory gives "Unknown"."""
        assert connector_resolutions(tmp_path / "nope") == []
        assert resolution_label(tmp_path / "nope") == "Unknown"
