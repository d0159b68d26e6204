"""
Pytest fixtures for adimages tests.
"""

import io
import logging

import pytest
from PIL import Image


def _encode_image(size=(100, 100), color='red', fmt='JPEG', mode='RGB', exif=None):
    """Encode a solid-colour test image."""
    img = Image.new(mode, size, color=color)
    buffer = io.BytesIO()
    if exif is not None:
        img.save(buffer, format=fmt, exif=exif)
    else:
        img.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def sample_image_bytes():
    """Fixture providing sample 100x100 JPEG bytes."""
    return _encode_image()


@pytest.fixture
def wide_image_bytes():
    """Fixture providing a 2400x1200 JPEG."""
    return _encode_image(size=(2400, 1200), color='blue')


@pytest.fixture
def sample_png_bytes():
    """Fixture providing sample PNG bytes with transparency."""
    return _encode_image(fmt='PNG', mode='RGBA', color=(255, 0, 0, 128))


@pytest.fixture
def site_root(tmp_path):
    """Fixture providing an empty project root."""
    return tmp_path


@pytest.fixture
def config(site_root):
    """Fixture providing a config for the temporary project root."""
    from adimages.config import OptimizerConfig

    return OptimizerConfig.from_root(site_root)


@pytest.fixture
def originals_dir(config):
    """Fixture providing an existing originals directory."""
    config.input_dir.mkdir(parents=True)
    return config.input_dir


@pytest.fixture
def fake_renderer():
    """Fixture providing a renderer that returns placeholder bytes."""
    from unittest.mock import MagicMock
    from adimages.renderer import DerivativeRenderer

    renderer = MagicMock(spec=DerivativeRenderer)
    renderer.render.side_effect = (
        lambda source, max_width, quality: f"derivative w={max_width} q={quality}".encode()
    )
    return renderer


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    return logging.getLogger('test')


@pytest.fixture
def make_image():
    """Fixture providing the test image encoder."""
    return _encode_image


@pytest.fixture
def umask_022():
    """Fixture running a test under umask 022."""
    import os

    previous = os.umask(0o022)
    yield
    os.umask(previous)
