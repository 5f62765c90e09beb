import pytest
import toml


@pytest.fixture
def stamp_dir(tmp_path):
    return tmp_path / 'stamps'


@pytest.fixture
def config_file(tmp_path, stamp_dir):
    file_name = tmp_path / 'config.toml'
    with open(file_name, 'w') as f:
        toml.dump({'stamps': {'dir': str(stamp_dir)}, 'timesheet': {'style': 'ascii'}}, f)
    return str(file_name)
