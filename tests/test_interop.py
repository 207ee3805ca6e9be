import cv2
import numpy as np
import pytest

from transform2d import InvalidParameter, deg2rad, similarity_about, translation
from transform2d.interop import from_cv_matrix, to_cv_matrix, warp_image_cv


def test_to_cv_matrix_layout():
    T = similarity_about((10.0, 20.0), 0.3, 2.0)
    m = to_cv_matrix(T)
    assert m.dtype == np.float64
    assert m.shape == (3, 3)
    assert m.flags["C_CONTIGUOUS"]
    np.testing.assert_array_equal(m, T.matrix)
    m[0, 0] = 0.0
    assert T.matrix[0, 0] != 0.0


def test_from_cv_rotation_matrix_matches_similarity():
    # OpenCV's positive angle turns counter-clockwise on screen (y down)
    c = (64.0, 48.0)
    M = cv2.getRotationMatrix2D(c, -30.0, 0.75)
    assert from_cv_matrix(M).allclose(similarity_about(c, deg2rad(30.0), 0.75), atol=1e-9)


def test_from_cv_matrix_accepts_3x3():
    T = translation(1.0, 2.0)
    assert from_cv_matrix(to_cv_matrix(T)) == T


def test_from_cv_matrix_rejects_bad_shape():
    with pytest.raises(InvalidParameter):
        from_cv_matrix(np.eye(4))


def test_warp_image_cv_defaults(grid_image):
    out = warp_image_cv(translation(5.0, 0.0), grid_image, interpolation="nearest", border_value=255)
    assert out.shape == grid_image.shape
    assert np.all(out[:, :5] == 255)
    np.testing.assert_array_equal(out[:, 5:], grid_image[:, :-5])


def test_warp_image_cv_rejects_unknown_interpolation(grid_image):
    with pytest.raises(InvalidParameter):
        warp_image_cv(translation(1.0, 0.0), grid_image, interpolation="area")


def test_warp_image_cv_rejects_bad_output_size(grid_image):
    with pytest.raises(InvalidParameter):
        warp_image_cv(translation(1.0, 0.0), grid_image, output_size=(0, 10))
    out = warp_image_cv(translation(1.0, 0.0), grid_image, output_size=(30, 20))
    assert out.shape == (20, 30, 3)
