import os
import stat
import tempfile
from pathlib import Path
from typing import Iterator, List, Tuple

from ember.config import FileConfiguration, RenderOptions
from ember.payload import load_binary


def format_bytes_as_hex(data: bytes, options: RenderOptions = RenderOptions()) -> Iterator[str]:
	if not data:
		return

	step = options.bytes_per_line
	for i in range(0, len(data), step):
		chunk = data[i:i + step]
		hex_values = [f'0x{byte:x}' for byte in chunk]

		suffix = ',' if i + step < len(data) else ''
		yield f'{options.indent}{", ".join(hex_values)}{suffix}'


def array_type(config: FileConfiguration, size: int, options: RenderOptions) -> str:
	return f'std::array<{options.element_type(config.signed)}, {size}>'


def open_namespace(config: FileConfiguration) -> List[str]:
	return [f'namespace {config.namespace} {{'] if config.namespace else []


def close_namespace(config: FileConfiguration) -> List[str]:
	return [f'}}  // namespace {config.namespace}'] if config.namespace else []


def render_header(config: FileConfiguration, size: int, options: RenderOptions = RenderOptions()) -> str:
	lines = [
		'#pragma once',
		'#include <array>',
		'#include <cstdint>',
	]
	lines += open_namespace(config)
	lines.append(f'extern const {array_type(config, size, options)} {config.symbol};')
	lines += close_namespace(config)
	return '\n'.join(lines) + '\n'


def render_source(config: FileConfiguration, data: bytes, options: RenderOptions = RenderOptions()) -> str:
	lines = [f'#include "{config.header_dest.as_posix()}"']
	lines += open_namespace(config)

	declaration = f'const {array_type(config, len(data), options)} {config.symbol} ='
	if data:
		lines.append(f'{declaration} {{')
		lines.extend(format_bytes_as_hex(data, options))
		lines.append('};')
	else:
		lines.append(f'{declaration} {{}};')

	lines += close_namespace(config)
	return '\n'.join(lines) + '\n'


def write_text(path: Path, content: str) -> None:
	with path.open('w', encoding='utf-8', newline='\n') as output_file:
		output_file.write(content)


def output_mode(path: Path) -> int:
	"""Mode a plain open(path, 'w') would leave on the destination."""
	if path.is_file():
		return stat.S_IMODE(path.stat().st_mode)
	umask = os.umask(0)
	os.umask(umask)
	return 0o666 & ~umask


def reserve_name(path: Path, suffix: str) -> Tuple[int, Path]:
	fd, name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix=suffix, dir=path.parent)
	return fd, Path(name)


def write_staged(documents: List[Tuple[Path, str]]) -> None:
	"""Stage every document beside its destination, then swap them all in.

	Destinations that already exist are moved aside first. If any swap fails
	the moved-aside files are put back and newly created ones are removed, so
	either every destination holds its new content or none of them changed.
	"""
	staged = []
	backups = []
	committed = []
	try:
		for path, content in documents:
			fd, temp_path = reserve_name(path, '.tmp')
			staged.append((temp_path, path))
			with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as output_file:
				output_file.write(content)
			os.chmod(temp_path, output_mode(path))

		for temp_path, path in staged:
			if path.is_file():
				fd, backup_path = reserve_name(path, '.bak')
				os.close(fd)
				try:
					os.replace(path, backup_path)
				except OSError:
					backup_path.unlink()
					raise
				backups.append((backup_path, path))
			os.replace(temp_path, path)
			committed.append(path)
	except BaseException:
		restored = {path for _, path in backups}
		for path in reversed(committed):
			if path not in restored:
				path.unlink()
		for backup_path, path in reversed(backups):
			os.replace(backup_path, path)
		for temp_path, _ in staged:
			if temp_path.exists():
				temp_path.unlink()
		raise

	for backup_path, _ in backups:
		backup_path.unlink()


def write_artifacts(config: FileConfiguration, header: str, source: str, atomic: bool = False) -> None:
	documents = [(config.header_dest, header), (config.source_dest, source)]

	if atomic:
		write_staged(documents)
		return

	for path, content in documents:
		try:
			write_text(path, content)
		except PermissionError:
			raise PermissionError(f'Cannot write to output file: {path}') from None


def generate_files(config: FileConfiguration, options: RenderOptions = RenderOptions(), atomic: bool = False) -> int:
	data = load_binary(config.path)
	header = render_header(config, len(data), options)
	source = render_source(config, data, options)
	write_artifacts(config, header, source, atomic=atomic)
	return len(data)
