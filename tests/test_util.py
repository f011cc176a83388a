import pathlib

import pytest

from elapse import util


def test_load_yaml_file(tmp_path: pathlib.Path):
    yaml_file = tmp_path / 'data.yml'
    yaml_file.write_text('clock: monotonic\nstarted: true\n')
    assert util.load_yaml_file(yaml_file) == {
        'clock': 'monotonic', 'started': True}


def test_load_yaml_file_empty(tmp_path: pathlib.Path):
    yaml_file = tmp_path / 'data.yml'
    yaml_file.write_text('')
    assert util.load_yaml_file(str(yaml_file)) == {}


def test_load_yaml_file_not_mapping(tmp_path: pathlib.Path):
    yaml_file = tmp_path / 'data.yml'
    yaml_file.write_text('3.5\n')
    with pytest.raises(ValueError):
        util.load_yaml_file(yaml_file)
