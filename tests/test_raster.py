"""
Tests for the raster store.
"""
import pytest

from pnmtool import Encoding, Plane, Raster


class TestEncoding:
    """Signature lookup and output selection."""

    def test_output_selection(self):
        assert Encoding.for_output(gray=True, binary=False) is Encoding.ASCII_GRAY
        assert Encoding.for_output(gray=False, binary=False) is Encoding.ASCII_COLOR
        assert Encoding.for_output(gray=True, binary=True) is Encoding.BINARY_GRAY
        assert Encoding.for_output(gray=False, binary=True) is Encoding.BINARY_COLOR

    def test_from_signature(self):
        assert Encoding.from_signature("P6") is Encoding.BINARY_COLOR
        assert Encoding.from_signature("P7") is None

    def test_channels(self):
        assert Encoding.BINARY_GRAY.channels == 1
        assert Encoding.ASCII_COLOR.channels == 3


class TestPlane:
    """Row-major sample access."""

    def test_get_set_row_major(self):
        plane = Plane.blank(3, 2)
        plane.set(1, 2, 9)
        assert plane.samples[5] == 9
        assert plane.get(1, 2) == 9
        assert plane.row(1) == bytes([0, 0, 9])

    def test_size_mismatch_rejected(self):
        with pytest.raises(ValueError):
            Plane(2, 2, bytearray(3))

    def test_zero_dimension_rejected(self):
        with pytest.raises(ValueError):
            Plane.blank(0, 4)

    def test_copy_is_independent(self):
        plane = Plane.filled(2, 2, 7)
        clone = plane.copy()
        clone.set(0, 0, 1)
        assert plane.get(0, 0) == 7


class TestRaster:
    """Mode exclusivity and validation."""

    def test_from_pixels(self):
        raster = Raster.from_pixels([[(1, 2, 3), (4, 5, 6)]])
        assert (raster.width, raster.height) == (2, 1)
        assert raster.pixel(0, 1) == (4, 5, 6)
        assert not raster.is_gray

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValueError):
            Raster.from_pixels([[(1, 2, 3)], [(1, 2, 3), (4, 5, 6)]])

    def test_set_gray_drops_color(self):
        raster = Raster.from_pixels([[(1, 2, 3)]])
        raster.set_gray(Plane.filled(1, 1, 42))
        assert raster.is_gray
        assert raster.red is None
        assert raster.pixel(0, 0) == (42,)

    def test_both_modes_invalid(self):
        raster = Raster.from_pixels([[(1, 2, 3)]])
        raster.gray = Plane.blank(1, 1)
        with pytest.raises(ValueError):
            raster.validate()

    def test_shape_mismatch_invalid(self):
        raster = Raster.from_pixels([[(1, 2, 3)]])
        with pytest.raises(ValueError):
            raster.set_color(Plane.blank(2, 1), Plane.blank(2, 1), Plane.blank(2, 1))
