import pytest

from clusterlab.clustering import (
    PALETTE,
    InvalidArgumentError,
    PointStore,
    clamp,
    color_for,
    colors_for,
)


class TestPointStore:

    def test_duplicate_clicks_are_collapsed(self):
        store = PointStore()
        store.add(1, 2)
        store.add(1, 2)
        store.add(1, 3)
        store.add(2, 2)

        assert len(store) == 3
        assert store.to_list() == [[1, 2], [1, 3], [2, 2]]

    def test_order_follows_first_x_then_y(self):
        store = PointStore()
        store.extend([[5, 1], [2, 9], [5, 0], [2, 9]])
        assert store.to_list() == [[5, 1], [5, 0], [2, 9]]

    def test_points_clamped_to_canvas(self):
        store = PointStore(bounds=(500, 400))
        store.extend([[-5, 600], [250, 200], [700, -1]])
        assert store.to_list() == [[0, 400], [250.0, 200.0], [500, 0]]

    def test_clamped_duplicates_collapse(self):
        store = PointStore(bounds=(10, 10))
        store.extend([[11, 5], [12, 5]])
        assert len(store) == 1

    def test_clear(self):
        store = PointStore()
        store.extend([[1, 1], [2, 2]])
        store.clear()
        assert len(store) == 0
        assert store.to_list() == []

    def test_malformed_point_rejected(self):
        store = PointStore()
        with pytest.raises(InvalidArgumentError):
            store.extend([[1, 2, 3]])


@pytest.mark.parametrize("value, expected", [
    (-1, 0),
    (0, 0),
    (3.5, 3.5),
    (10, 10),
    (11, 10),
])
def test_clamp(value, expected):
    assert clamp(value, 0, 10) == expected


class TestPalette:

    def test_first_colors(self):
        assert color_for(0) == 'hsl(0, 100%, 50%)'
        assert color_for(4) == 'hsl(320, 100%, 50%)'

    def test_wraps_modulo_palette_size(self):
        assert len(PALETTE) == 5
        assert color_for(5) == color_for(0)
        assert color_for(13) == color_for(3)

    def test_negative_index_rejected(self):
        with pytest.raises(InvalidArgumentError):
            color_for(-1)

    def test_colors_for(self):
        assert colors_for([0, 1, 0]) == [PALETTE[0], PALETTE[1], PALETTE[0]]
