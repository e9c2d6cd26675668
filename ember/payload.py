import os
from pathlib import Path

from ember.config import PathLike
from ember.errors import ConfigurationError, ShortReadError


def load_binary(path: PathLike) -> bytes:
	"""Read the whole file in one pass.

	The size is taken from the open handle before reading; a file that yields
	fewer bytes than that is reported as a ShortReadError rather than returned
	truncated.
	"""
	path = Path(path)

	if path.exists() and not path.is_file():
		raise ConfigurationError(f"'{path}' is not a regular file.")

	try:
		with path.open('rb') as input_file:
			size = os.fstat(input_file.fileno()).st_size
			data = input_file.read(size)
	except FileNotFoundError:
		raise FileNotFoundError(f'Input file not found: {path}') from None
	except PermissionError:
		raise PermissionError(f'Cannot read input file: {path}') from None

	if len(data) != size:
		raise ShortReadError(path, size, len(data))

	return data
