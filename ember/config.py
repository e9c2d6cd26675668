import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ember.errors import ConfigurationError

PathLike = Union[str, Path]

IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


@dataclass(frozen=True)
class RenderOptions:
	"""Formatting constants shared by both generated documents."""

	bytes_per_line: int = 8
	header_ext: str = '.hpp'
	source_ext: str = '.cpp'
	unsigned_type: str = 'uint8_t'
	signed_type: str = 'int8_t'
	indent: str = '    '

	def __post_init__(self):
		if self.bytes_per_line < 1:
			raise ConfigurationError(f'bytes_per_line must be at least 1, got {self.bytes_per_line}')

	def element_type(self, signed: bool) -> str:
		return self.signed_type if signed else self.unsigned_type


@dataclass(frozen=True)
class FileConfiguration:
	symbol: str
	path: Path
	header_dest: Path
	source_dest: Path
	namespace: str = ''
	signed: bool = False


def append_suffix(path: Path, suffix: str) -> Path:
	# Appended, not substituted: assets/icon.png -> assets/icon.png.hpp
	return path.with_name(path.name + suffix)


def derive_symbol(filename: str) -> str:
	return Path(filename).name.replace('.', '_')


def validate_identifier(name: str, what: str = 'symbol') -> str:
	if not IDENTIFIER_PATTERN.fullmatch(name):
		raise ConfigurationError(f"Invalid {what} '{name}': not a C++ identifier")
	return name


def validate_namespace(namespace: str) -> str:
	for part in namespace.split('::'):
		validate_identifier(part, 'namespace')
	return namespace


def resolve_configuration(
	input_path: PathLike,
	symbol: str = '',
	namespace: str = '',
	signed: bool = False,
	strict: bool = False,
	options: RenderOptions = RenderOptions(),
) -> FileConfiguration:
	if not input_path:
		raise ConfigurationError('An input file path is required')

	path = Path(input_path)
	symbol = symbol or derive_symbol(path.name)
	namespace = namespace or ''

	if strict:
		validate_identifier(symbol)
		if namespace:
			validate_namespace(namespace)

	return FileConfiguration(
		symbol=symbol,
		path=path,
		header_dest=append_suffix(path, options.header_ext),
		source_dest=append_suffix(path, options.source_ext),
		namespace=namespace,
		signed=signed,
	)
