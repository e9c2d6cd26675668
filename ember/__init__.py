from ember.config import FileConfiguration, RenderOptions, derive_symbol, resolve_configuration
from ember.errors import ConfigurationError, EmberError, ShortReadError
from ember.payload import load_binary
from ember.render import generate_files, render_header, render_source, write_artifacts

__version__ = '0.1.0'

__all__ = [
	'ConfigurationError',
	'EmberError',
	'FileConfiguration',
	'RenderOptions',
	'ShortReadError',
	'derive_symbol',
	'generate_files',
	'load_binary',
	'render_header',
	'render_source',
	'resolve_configuration',
	'write_artifacts',
]
