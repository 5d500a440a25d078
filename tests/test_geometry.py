# Tests for shadow geometry
"""
Test downscale padding, effective radius, final size and compositing rectangle.
"""

import pytest

from shadowstag import (
    BlurType,
    Insets,
    InvalidConfig,
    InvalidDimension,
    MIN_BLUR_RADIUS,
    Rect,
    ShadowConfig,
    compositing_rect,
    compute_geometry,
    content_padding,
)


class TestComputeGeometry:
    """Tests for compute_geometry."""

    def test_reference_scenario(self, stack_config):
        geometry = compute_geometry(100, 100, stack_config)

        assert geometry.downscaled_width == 25
        assert geometry.downscaled_height == 25
        assert geometry.downscale_padding == 2
        assert geometry.effective_radius == 2
        assert (geometry.final_width, geometry.final_height) == (120, 120)

    @pytest.mark.parametrize("rate", [1, 2, 3, 4, 7, 16])
    @pytest.mark.parametrize("width,height", [(16, 16), (100, 37), (641, 480)])
    def test_final_size_independent_of_downscale_rate(self, rate, width, height):
        config = ShadowConfig(blur_radius=9, downscale_rate=rate, blur_type=BlurType.STACK)

        geometry = compute_geometry(width, height, config)

        assert geometry.final_width == width + 18
        assert geometry.final_height == height + 18

    @pytest.mark.parametrize("radius,rate", [(1, 4), (3, 4), (1, 1), (7, 8), (100, 3)])
    def test_effective_radius_at_least_minimum(self, radius, rate):
        config = ShadowConfig(blur_radius=radius, downscale_rate=rate, blur_type=BlurType.STACK)
        geometry = compute_geometry(64, 64, config)
        assert geometry.effective_radius >= MIN_BLUR_RADIUS
        assert geometry.effective_radius == max(radius // rate, 1)

    def test_small_radius_gets_no_padding(self):
        config = ShadowConfig(blur_radius=3, downscale_rate=4)
        geometry = compute_geometry(40, 40, config)
        assert geometry.downscale_padding == 0
        assert geometry.effective_radius == 1

    def test_empty_container_raises(self, stack_config):
        with pytest.raises(InvalidDimension):
            compute_geometry(0, 0, stack_config)

    def test_collapsed_downscale_raises(self, stack_config):
        with pytest.raises(InvalidDimension):
            compute_geometry(100, 3, stack_config)

    def test_unvalidated_zero_rate_raises(self):
        config = ShadowConfig.model_construct(downscale_rate=0)
        with pytest.raises(InvalidConfig):
            compute_geometry(100, 100, config)


class TestCompositingRect:
    """The shadow rectangle is the container rectangle grown by the offsets."""

    def test_uniform_offsets(self, stack_config):
        rect = compositing_rect(Rect(0, 0, 100, 100), stack_config)
        assert rect == Rect(-5, -5, 105, 105)

    def test_per_side_offsets(self):
        config = ShadowConfig(left_offset=1, top_offset=2, right_offset=3, bottom_offset=4)
        rect = compositing_rect(Rect.from_size(10, 20, 50, 40), config)
        assert rect == Rect(9, 18, 63, 64)
        assert (rect.width, rect.height) == (54, 46)

    def test_zero_offsets_keep_container_rect(self):
        container = Rect(3, 4, 30, 40)
        assert compositing_rect(container, ShadowConfig()) == container


class TestContentPadding:
    """Children are pushed inwards by the shadow offsets."""

    def test_offsets_added_to_padding(self):
        config = ShadowConfig(left_offset=1, top_offset=2, right_offset=3, bottom_offset=4)
        assert content_padding(Insets(10, 10, 10, 10), config) == Insets(11, 12, 13, 14)

    def test_no_offsets(self):
        assert content_padding(Insets(1, 2, 3, 4), ShadowConfig()) == Insets(1, 2, 3, 4)

    def test_padding_grows_by_exact_offsets(self):
        config = ShadowConfig(right_offset=7, bottom_offset=9)
        assert content_padding(Insets(), config) == Insets(0, 0, 7, 9)


class TestRect:
    """Tests for Rect helpers."""

    def test_empty(self):
        assert Rect(0, 0, 0, 10).is_empty
        assert not Rect(0, 0, 1, 1).is_empty
