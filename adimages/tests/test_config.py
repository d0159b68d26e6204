"""Tests for OptimizerConfig and BatchStats."""

import time
from pathlib import Path

from adimages.batch_stats import BatchStats
from adimages.config import OptimizerConfig


class TestOptimizerConfig:
    """Tests for OptimizerConfig dataclass."""

    def test_from_root_layout(self, tmp_path):
        """Test the standard site layout."""
        config = OptimizerConfig.from_root(tmp_path)

        assert config.input_dir == tmp_path / 'static' / 'images' / 'originals'
        assert config.output_dir == tmp_path / 'static' / 'images'
        assert config.index_path == tmp_path / 'static' / 'ads.json'

    def test_defaults(self, tmp_path):
        """Test default sizes and qualities."""
        config = OptimizerConfig.from_root(tmp_path)

        assert config.full_width == 1200
        assert config.full_quality == 80
        assert config.thumb_width == 300
        assert config.thumb_quality == 70
        assert config.min_source_bytes == 16
        assert config.pretty_index is False

    def test_from_root_overrides(self, tmp_path):
        """Test keyword overrides."""
        config = OptimizerConfig.from_root(tmp_path, thumb_width=150)

        assert config.thumb_width == 150

    def test_string_paths_converted(self):
        """Test string paths become Path objects."""
        config = OptimizerConfig(input_dir='in', output_dir='out', index_path='out/ads.json')

        assert isinstance(config.input_dir, Path)
        assert config.index_path == Path('out/ads.json')

    def test_validate_ok(self, tmp_path):
        """Test the default configuration is valid."""
        assert OptimizerConfig.from_root(tmp_path).validate() == []

    def test_validate_errors(self, tmp_path):
        """Test invalid values are reported."""
        config = OptimizerConfig.from_root(
            tmp_path, full_width=0, thumb_quality=101, output_extension='webp'
        )

        errors = config.validate()

        assert len(errors) == 3
        assert any('full_width' in e for e in errors)
        assert any('thumb_quality' in e for e in errors)

    def test_is_image_file(self, tmp_path):
        """Test extension matching is case-insensitive."""
        config = OptimizerConfig.from_root(tmp_path)

        assert config.is_image_file('a.jpg')
        assert config.is_image_file('a.JPEG')
        assert config.is_image_file('a.Png')
        assert config.is_image_file('a.webp')
        assert config.is_image_file('a.gif')
        assert not config.is_image_file('a.json')
        assert not config.is_image_file('jpg')

    def test_output_paths(self, tmp_path):
        """Test derivative paths and urls."""
        config = OptimizerConfig.from_root(tmp_path)

        assert config.full_output_path('a') == tmp_path / 'static' / 'images' / 'a.webp'
        assert config.thumb_output_path('a') == tmp_path / 'static' / 'images' / 'a-thumb.webp'
        assert config.sidecar_path('a') == config.input_dir / 'a.json'
        assert config.image_url('a') == 'images/a.webp'
        assert config.thumb_url('a') == 'images/a-thumb.webp'


class TestBatchStats:
    """Tests for BatchStats class."""

    def test_elapsed_seconds(self):
        """Test elapsed time calculation."""
        stats = BatchStats()
        stats.start_time = time.time() - 10

        assert stats.elapsed_seconds >= 10
        assert stats.elapsed_seconds < 12

    def test_record_failure(self):
        """Test failures are counted and described."""
        stats = BatchStats(total_found=3)
        stats.processed = 1

        stats.record_failure('d.jpg', 'file too small or unreadable')

        assert stats.errors == 1
        assert stats.error_details == ['d.jpg: file too small or unreadable']
        assert stats.completed_count == 2
