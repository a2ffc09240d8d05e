import pytest

from easypap.img_data import ImageData


def test_new_image_is_black():
    img = ImageData(4)
    assert all(img[i, j] == 0 for i in range(4) for j in range(4))
    assert len(img.image) == len(img.alt_image) == 16


def test_zero_dim_rejected():
    with pytest.raises(ValueError):
        ImageData(0)


def test_set_and_get_pixel():
    img = ImageData(8)
    img[3, 5] = 0xFFFFFFFF
    assert img[3, 5] == 0xFFFFFFFF
    assert img[5, 3] == 0


def test_row_major_layout():
    img = ImageData(4)
    img[1, 2] = 7
    assert img.image[1 * 4 + 2] == 7


def test_replicate_copies_into_alternate():
    img = ImageData(3)
    img[0, 1] = 42
    img.replicate()
    assert list(img.alt_image) == list(img.image)


def test_swap_exchanges_images():
    img = ImageData(3)
    img[2, 2] = 9
    img.swap()
    assert img[2, 2] == 0
    assert img.alt_image[8] == 9


@pytest.mark.parametrize("pos", [(4, 0), (0, 4), (-1, 0)])
def test_out_of_range_pixel(pos):
    img = ImageData(4)
    with pytest.raises(IndexError):
        img.__getitem__(pos)
    with pytest.raises(IndexError):
        img.__setitem__(pos, 1)
    assert sum(img.image) == 0


def test_value_too_large():
    img = ImageData(2)
    with pytest.raises(OverflowError):
        img.__setitem__((0, 0), 0x100000000)
    assert img[0, 0] == 0