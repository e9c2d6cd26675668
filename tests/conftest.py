import pytest

from ember.config import resolve_configuration


@pytest.fixture
def write_input(tmp_path):
	def _write(data: bytes, name: str = 'asset.bin'):
		path = tmp_path / name
		path.write_bytes(data)
		return path
	return _write


@pytest.fixture
def make_config(tmp_path):
	def _make(name: str = 'asset.bin', **kwargs):
		return resolve_configuration(tmp_path / name, **kwargs)
	return _make
