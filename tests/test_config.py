import pytest

from imgfilters.config import Config, load_config
from imgfilters.errors import ConfigError, FilterError, InvalidRadius
from imgfilters.kernels import EmbossVariant

VALID_CONFIG = '''
box_radius = 3
gaussian_radius = 5
emboss_kind = "application"
image = "raw_images/small.jpg"
'''


@pytest.fixture
def write_config(tmp_path):
    def write(text: str):
        path = tmp_path / 'config.toml'
        path.write_text(text)
        return path

    return write


def test_load_config(write_config):
    config = load_config(write_config(VALID_CONFIG))

    assert config == Config(
        box_radius=3,
        gaussian_radius=5,
        emboss_kind=EmbossVariant.APPLICATION,
        image='raw_images/small.jpg',
    )


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / 'nope.toml')


def test_broken_toml(write_config):
    with pytest.raises(ConfigError, match="failed to parse"):
        load_config(write_config('box_radius = = 3'))


def test_missing_field(write_config):
    text = VALID_CONFIG.replace('gaussian_radius = 5\n', '')

    with pytest.raises(ConfigError, match="gaussian_radius"):
        load_config(write_config(text))


def test_zero_radius_is_invalid(write_config):
    text = VALID_CONFIG.replace('box_radius = 3', 'box_radius = 0')

    with pytest.raises(InvalidRadius):
        load_config(write_config(text))


@pytest.mark.parametrize('value', ['true', '2.5', '"3"'])
def test_radius_must_be_integer(write_config, value):
    text = VALID_CONFIG.replace('box_radius = 3', f'box_radius = {value}')

    with pytest.raises(ConfigError, match="box_radius"):
        load_config(write_config(text))


def test_unknown_emboss_kind(write_config):
    text = VALID_CONFIG.replace('"application"', '"diagonal"')

    with pytest.raises(ConfigError, match="left, right, edge, application"):
        load_config(write_config(text))


def test_image_must_be_string():
    with pytest.raises(FilterError):
        Config.from_dict({
            'box_radius': 1,
            'gaussian_radius': 1,
            'emboss_kind': 'edge',
            'image': 42,
        })
