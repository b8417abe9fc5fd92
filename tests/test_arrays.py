"""Tests for N-dimensional array flattening."""

import pytest

from sklibgen.arrays import flatten, index_expr


class TestFlatten:
    @pytest.mark.parametrize(
        "sizes,expected",
        [([3, 3], 9), ([4], 4), ([2, 3, 4], 24), ((5, 2), 10)],
    )
    def test_product_of_dimensions(self, sizes, expected):
        assert flatten(sizes) == expected


class TestIndexExpr:
    """Tests for index_expr."""

    def test_square_2d(self):
        assert index_expr([3, 3], 4) == "[1][1]"
        assert index_expr([3, 3], 0) == "[0][0]"
        assert index_expr([3, 3], 8) == "[2][2]"

    def test_square_2d_covers_every_cell_once(self):
        cells = {index_expr([3, 3], i) for i in range(flatten([3, 3]))}
        assert len(cells) == 9

    def test_1d(self):
        assert index_expr([5], 3) == "[3]"

    def test_3d_stays_flat(self):
        assert index_expr([2, 3, 4], 17) == "[17]"

    def test_non_square_divides_by_row_count(self):
        """The row is flat_idx // rows, not flat_idx // cols.

        For [2, 3] a row-major layout would put index 4 at [1][1]; dividing
        by the row count gives [2][1] instead. Square arrays agree with
        row-major order, non-square ones do not.
        """
        assert index_expr([2, 3], 4) == "[2][1]"
        assert index_expr([3, 2], 4) == "[1][0]"
        for i in range(9):
            row, col = divmod(i, 3)
            assert index_expr([3, 3], i) == f"[{row}][{col}]"

    def test_zero_width_column_is_kept(self):
        """A zero column count is used as declared, never replaced by rows."""
        assert flatten([2, 0]) == 0
        assert [index_expr([2, 0], i) for i in range(flatten([2, 0]))] == []
        with pytest.raises(ZeroDivisionError):
            index_expr([2, 0], 1)
