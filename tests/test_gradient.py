import numpy as np

from imgfilters import gradient


def test_constant_plane_has_no_edges():
    plane = np.full((5, 6), 173, dtype='uint8')

    result = gradient.sobel(plane)

    assert result.shape == plane.shape
    assert result.dtype == np.uint8
    assert np.all(result == 0)


def test_vertical_step_saturates_next_to_the_edge():
    plane = np.array([[0, 0, 100, 100]] * 4, dtype='uint8')

    result = gradient.sobel(plane)

    assert result.tolist() == [[0, 255, 255, 0]] * 4


def test_horizontal_step_saturates_next_to_the_edge():
    plane = np.array([[0] * 3, [0] * 3, [100] * 3, [100] * 3], dtype='uint8')

    result = gradient.sobel(plane)

    assert result.T.tolist() == [[0, 255, 255, 0]] * 3


def test_negative_gradient_is_combined_before_clamping():
    y, x = np.indices((5, 5))
    plane = (x + y).astype('uint8')

    result = gradient.sobel(plane)

    # gx = 8 and gy = -8 inside the plane
    assert np.all(result[1:-1, 1:-1] == 11)
