"""
Frame Extractor Tests
=====================

Band geometry, pixel fidelity and remainder handling.
"""

import numpy as np
import pytest

from conftest import BAND_COLORS, unique_row_surface
from filmstrip_splitter.errors import ArgumentError, DimensionError
from filmstrip_splitter.extractor import (
    FrameExtractor,
    extract_frames,
    plan_extraction,
)
from filmstrip_splitter.models.frame import FilmstripSpec
from filmstrip_splitter.models.surface import PixelSurface


class TestPlanExtraction:
    """Frame height derivation."""
    
    def test_even_split(self):
        plan = plan_extraction(400, 4)
        assert plan.frame_height == 100
        assert plan.remainder_rows == 0
        assert plan.warning is None
    
    def test_uneven_split_warns(self):
        plan = plan_extraction(401, 4)
        assert plan.frame_height == 100
        assert plan.remainder_rows == 1
        assert plan.warning is not None
        assert plan.warning.discarded_rows == 1
        assert "401" in plan.warning.message
    
    def test_uneven_split_strict(self):
        with pytest.raises(DimensionError):
            plan_extraction(401, 4, remainder_policy="error")
    
    def test_strict_accepts_even_split(self):
        assert plan_extraction(400, 4, remainder_policy="error").frame_height == 100
    
    @pytest.mark.parametrize("frame_count", [0, -1, -128])
    def test_non_positive_frame_count(self, frame_count):
        with pytest.raises(ArgumentError):
            plan_extraction(400, frame_count)
    
    def test_more_frames_than_rows(self):
        with pytest.raises(DimensionError):
            plan_extraction(10, 11)
    
    def test_unknown_policy(self):
        with pytest.raises(ArgumentError):
            plan_extraction(400, 4, remainder_policy="pad")
    
    def test_bands_are_contiguous(self):
        plan = plan_extraction(37, 5)
        bands = [plan.band(i) for i in range(5)]
        assert bands[0] == (0, 7)
        for (_, prev_end), (start, _) in zip(bands, bands[1:]):
            assert start == prev_end
        assert bands[-1][1] == 35
    
    def test_band_out_of_range(self):
        plan = plan_extraction(40, 4)
        with pytest.raises(IndexError):
            plan.band(4)


class TestFrameExtractor:
    """Frame contents and ordering."""
    
    def test_scenario_a_solid_bands(self, scenario_a_surface):
        frames = extract_frames(scenario_a_surface, 4)
        
        assert [f.index for f in frames] == [0, 1, 2, 3]
        for frame, color in zip(frames, BAND_COLORS):
            assert frame.surface.size == (100, 100)
            assert np.all(frame.surface.pixels == np.array(color, dtype=np.uint8))
    
    def test_scenario_b_excludes_last_row(self, scenario_b_surface):
        extractor = FrameExtractor(scenario_b_surface, 4)
        frames = list(extractor)
        
        assert extractor.plan.warning is not None
        assert len(frames) == 4
        assert all(f.surface.size == (100, 100) for f in frames)
        # Row 400 is grey; no frame contains it
        last = frames[-1].surface.pixels
        assert np.all(last == np.array(BAND_COLORS[-1], dtype=np.uint8))
    
    def test_pixel_fidelity(self):
        source = unique_row_surface(width=9, height=50)
        extractor = FrameExtractor(source, 7)
        frame_height = extractor.frame_height
        
        assert frame_height == 7
        for frame in extractor:
            for y in range(frame_height):
                for x in range(source.width):
                    assert frame.surface.pixel(x, y) == source.pixel(x, frame.index * frame_height + y)
    
    def test_heights_sum_even(self):
        source = PixelSurface.blank(4, 128)
        frames = extract_frames(source, 16)
        assert sum(f.height for f in frames) == 128
        assert {f.height for f in frames} == {8}
    
    def test_heights_sum_uneven(self):
        source = PixelSurface.blank(4, 130)
        frames = extract_frames(source, 16)
        total = sum(f.height for f in frames)
        assert total == 16 * (130 // 16)
        assert total < 130
    
    def test_frames_do_not_share_memory_with_source(self, scenario_a_surface):
        frame = FrameExtractor(scenario_a_surface, 4).extract(2)
        assert not np.shares_memory(frame.surface.pixels, scenario_a_surface.pixels)
    
    def test_single_frame_is_whole_image(self):
        source = unique_row_surface(width=3, height=5)
        (frame,) = extract_frames(source, 1)
        assert frame.surface == source
    
    def test_extract_is_repeatable(self, scenario_a_surface):
        extractor = FrameExtractor(scenario_a_surface, 4)
        assert extractor.extract(1).surface == extractor.extract(1).surface
    
    def test_len(self, scenario_a_surface):
        assert len(FrameExtractor(scenario_a_surface, 4)) == 4


class TestFilmstripSpec:
    """Request validation."""
    
    def test_rejects_zero_frames(self, scenario_a_surface):
        with pytest.raises(ArgumentError):
            FilmstripSpec(source=scenario_a_surface, frame_count=0)
    
    def test_rejects_empty_prefix(self, scenario_a_surface):
        with pytest.raises(ArgumentError):
            FilmstripSpec(source=scenario_a_surface, frame_count=4, prefix="")
    
    def test_defaults(self, scenario_a_surface):
        spec = FilmstripSpec(source=scenario_a_surface, frame_count=4)
        assert spec.prefix == "frame"


class TestBoundCheck:
    """Rows beyond the source are zero-filled, never read."""
    
    def test_overrun_rows_zero_filled(self):
        from filmstrip_splitter.extractor import ExtractionPlan
        
        source = unique_row_surface(width=2, height=100)
        extractor = FrameExtractor(source, 2)
        # Inconsistent geometry: band 1 covers rows 60..120 of a 100-row source
        extractor._plan = ExtractionPlan(source_height=100, frame_count=2, frame_height=60)
        
        frame = extractor.extract(1)
        assert frame.surface.size == (2, 60)
        assert np.array_equal(frame.surface.pixels[:40], source.pixels[60:100])
        assert not frame.surface.pixels[40:].any()
