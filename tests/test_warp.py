import numpy as np
import pytest

from transform2d import (
    DegenerateTransform,
    InvalidParameter,
    deg2rad,
    from_matrix,
    identity,
    scaling,
    similarity_about,
    translation,
    warp_image,
)
from transform2d.interop import warp_image_cv
from transform2d.processing import sample_cubic, sample_linear, sample_nearest


def test_identity_nearest_is_pixel_exact(noise_image):
    out = warp_image(identity(), noise_image, interpolation="nearest")
    assert out.dtype == noise_image.dtype
    np.testing.assert_array_equal(out, noise_image)


@pytest.mark.parametrize("interpolation", ["bilinear", "bicubic"])
def test_identity_smooth_interior(noise_image, interpolation):
    out = warp_image(identity(), noise_image, interpolation=interpolation)
    np.testing.assert_allclose(
        out[2:-2, 2:-2].astype(float), noise_image[2:-2, 2:-2].astype(float), atol=1.0
    )


def test_grayscale_and_float_images(ramp_image):
    out = warp_image(identity(), ramp_image, interpolation="linear")
    assert out.dtype == np.float32
    assert out.shape == ramp_image.shape
    np.testing.assert_array_equal(out, ramp_image)


def test_border_fills_outside_source():
    src = np.full((10, 10), 50, dtype=np.uint8)
    for interpolation in ("nearest", "bilinear", "bicubic"):
        out = warp_image(identity(), src, output_size=(15, 12), interpolation=interpolation, border_value=7)
        assert out.shape == (12, 15)
        assert np.all(out[:9, :9] == 50)
        assert np.all(out[10:, :] == 7)
        assert np.all(out[:, 10:] == 7)


def test_border_default_is_zero(noise_image):
    out = warp_image(translation(1000.0, 0.0), noise_image, interpolation="nearest")
    assert not out.any()


def test_border_per_channel(noise_image):
    out = warp_image(translation(0.0, 500.0), noise_image, interpolation="bilinear", border_value=(1, 2, 3))
    np.testing.assert_array_equal(out[0, 0], [1, 2, 3])
    np.testing.assert_array_equal(out[-1, -1], [1, 2, 3])


def test_integer_translation_moves_pixels(noise_image):
    out = warp_image(translation(3.0, 2.0), noise_image, interpolation="nearest")
    np.testing.assert_array_equal(out[2:, 3:], noise_image[:-2, :-3])
    assert not out[:2].any()
    assert not out[:, :3].any()


def test_matches_opencv_for_integer_translation(noise_image):
    T = translation(3.0, -2.0)
    ours = warp_image(T, noise_image, interpolation="nearest")
    theirs = warp_image_cv(T, noise_image, interpolation="nearest")
    np.testing.assert_array_equal(ours, theirs)


def test_subpixel_translation_of_linear_ramp(ramp_image):
    T = translation(2.5, 1.25)
    out = warp_image(T, ramp_image, interpolation="bilinear")
    ys, xs = np.mgrid[0:40, 0:50]
    expected = 2.0 * (xs - 2.5) + 3.0 * (ys - 1.25)
    # destination pixels whose 2x2 source neighbourhood is inside the image
    np.testing.assert_allclose(out[3:-1, 4:-1], expected[3:-1, 4:-1], atol=1e-4)

    theirs = warp_image_cv(T, ramp_image, interpolation="bilinear")
    np.testing.assert_allclose(out[3:-1, 4:-1], theirs[3:-1, 4:-1], atol=1e-3)


@pytest.mark.parametrize("dtype", [np.float32, np.uint8])
def test_bicubic_matches_opencv_on_subpixel_translation(ramp_image, dtype):
    src = ramp_image.astype(dtype)
    T = translation(2.5, 1.25)
    ours = warp_image(T, src, interpolation="bicubic")
    theirs = warp_image_cv(T, src, interpolation="bicubic")
    # destination pixels whose 4x4 source neighbourhood is inside the image
    np.testing.assert_allclose(
        ours[3:-2, 4:-2].astype(float), theirs[3:-2, 4:-2].astype(float), atol=1.0
    )


def test_bicubic_matches_opencv_on_rotation(ramp_image):
    S = similarity_about((25.0, 20.0), deg2rad(10.0), 1.0)
    ours = warp_image(S, ramp_image, interpolation="bicubic")
    theirs = warp_image_cv(S, ramp_image, interpolation="bicubic")
    np.testing.assert_allclose(ours[12:28, 17:33], theirs[12:28, 17:33], atol=0.25)


def test_output_identical_for_any_worker_count():
    rng = np.random.default_rng(1)
    src = rng.integers(0, 256, size=(150, 200, 3), dtype=np.uint8)
    S = similarity_about((100.0, 75.0), deg2rad(30.0), 0.75)
    single = warp_image(S, src, interpolation="bicubic", workers=1)
    threaded = warp_image(S, src, interpolation="bicubic", workers=4)
    np.testing.assert_array_equal(single, threaded)


def test_similarity_keeps_centre_pixel(grid_image):
    h, w = grid_image.shape[:2]
    S = similarity_about((w // 2, h // 2), deg2rad(30.0), 0.75)
    out = warp_image(S, grid_image, interpolation="nearest")
    np.testing.assert_array_equal(out[h // 2, w // 2], grid_image[h // 2, w // 2])


def test_downscale_halves_content():
    src = np.zeros((20, 20), dtype=np.float64)
    src[:, 10:] = 1.0
    out = warp_image(scaling(0.5), src, interpolation="nearest")
    assert out[0, 4] == 0.0
    assert out[0, 6] == 1.0
    assert not out[:, 10:].any()


def test_singular_transform_raises(noise_image):
    singular = from_matrix([[0.0, 0.0, 5.0], [0.0, 0.0, 5.0], [0.0, 0.0, 1.0]])
    with pytest.raises(DegenerateTransform):
        warp_image(singular, noise_image)
    with pytest.raises(DegenerateTransform):
        warp_image_cv(singular, noise_image)


def test_non_affine_transform_raises(noise_image):
    with pytest.raises(DegenerateTransform):
        warp_image(identity().with_coefficient(2, 1, 0.01), noise_image)


def test_invalid_arguments(noise_image):
    with pytest.raises(InvalidParameter):
        warp_image(identity(), noise_image, interpolation="lanczos")
    with pytest.raises(InvalidParameter):
        warp_image(identity(), noise_image, output_size=(0, 10))
    with pytest.raises(InvalidParameter):
        warp_image(identity(), np.zeros(5))
    with pytest.raises(InvalidParameter):
        warp_image(identity(), noise_image, border_value=(1, 2))
    with pytest.raises(InvalidParameter):
        warp_image(identity(), noise_image[..., 0], border_value=(1, 2, 3))
    with pytest.raises(InvalidParameter):
        warp_image(identity(), noise_image, workers=0)
    with pytest.raises(InvalidParameter):
        warp_image(identity(), noise_image, workers="many")


def test_samplers_at_fractional_coordinates():
    src = np.array([[0.0, 10.0], [20.0, 30.0]])
    border = np.asarray(0.0)
    x, y = np.array([0.5]), np.array([0.5])
    np.testing.assert_allclose(sample_linear(src, x, y, border), [15.0])
    np.testing.assert_array_equal(sample_nearest(src, np.array([0.4]), np.array([0.6]), border), [20.0])
    np.testing.assert_allclose(sample_cubic(src, np.array([1.0]), np.array([0.0]), border), [10.0])


def test_far_outside_coordinates_are_border():
    src = np.ones((4, 4))
    border = np.asarray(9.0)
    x, y = np.array([-1e300, 1e300]), np.array([0.0, 2.0])
    np.testing.assert_array_equal(sample_nearest(src, x, y, border), [9.0, 9.0])
    np.testing.assert_allclose(sample_linear(src, x, y, border), [9.0, 9.0])
    np.testing.assert_allclose(sample_cubic(src, x, y, border), [9.0, 9.0])
