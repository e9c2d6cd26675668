class EmberError(Exception):
	pass


class ConfigurationError(EmberError, ValueError):
	pass


class ShortReadError(EmberError, OSError):
	def __init__(self, path, expected: int, actual: int):
		super().__init__(f"Short read from '{path}': expected {expected} bytes, got {actual}")
		self.path = path
		self.expected = expected
		self.actual = actual
