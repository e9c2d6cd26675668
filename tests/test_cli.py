import pytest

from ember.cli import main


def test_generates_pair(write_input, capsys):
	path = write_input(b'\x01\x02\x03', name='icon.png')

	assert main([str(path)]) == 0

	header = path.with_name('icon.png.hpp').read_text()
	source = path.with_name('icon.png.cpp').read_text()
	assert 'extern const std::array<uint8_t, 3> icon_png;' in header
	assert '0x1, 0x2, 0x3' in source
	assert 'Successfully embedded 3 bytes' in capsys.readouterr().out


def test_options(write_input):
	path = write_input(bytes(20))

	assert main([str(path), '-s', 'blob', '-n', 'res', '--signed', '--bytes-per-line', '10', '-q']) == 0

	source = path.with_name('asset.bin.cpp').read_text()
	assert 'namespace res {' in source
	assert 'const std::array<int8_t, 20> blob = {' in source
	assert source.count('    0x0') == 2


def test_verbose(write_input, capsys):
	path = write_input(b'')

	assert main([str(path), '-v', '-n', 'res']) == 0

	out = capsys.readouterr().out
	assert 'Symbol: asset_bin' in out
	assert 'Namespace: res' in out
	assert 'Element type: uint8_t' in out


def test_quiet(write_input, capsys):
	assert main([str(write_input(b'a')), '-q']) == 0
	assert capsys.readouterr().out == ''


def test_missing_input(tmp_path, capsys):
	assert main([str(tmp_path / 'nope.bin')]) == 1

	err = capsys.readouterr().err
	assert err.startswith('Error: ')
	assert 'nope.bin' in err
	assert not (tmp_path / 'nope.bin.hpp').exists()


def test_strict_failure(write_input, capsys):
	path = write_input(b'a', name='9-lives.bin')

	assert main([str(path), '--strict']) == 1
	assert "Invalid symbol '9-lives_bin'" in capsys.readouterr().err


def test_bad_bytes_per_line(write_input, capsys):
	assert main([str(write_input(b'a')), '--bytes-per-line', '0']) == 1
	assert 'bytes_per_line' in capsys.readouterr().err


def test_input_required():
	with pytest.raises(SystemExit) as excinfo:
		main([])
	assert excinfo.value.code == 2


def test_unwritable_destination(write_input, capsys):
	path = write_input(b'\x01\x02')
	path.with_name('asset.bin.cpp').mkdir()

	assert main([str(path)]) == 1
	assert capsys.readouterr().err.startswith('Error: ')


def test_unwritable_destination_atomic(write_input, capsys):
	path = write_input(b'\x01\x02')
	path.with_name('asset.bin.cpp').mkdir()

	assert main([str(path), '--atomic']) == 1
	assert capsys.readouterr().err.startswith('Error: ')
	assert not path.with_name('asset.bin.hpp').exists()
