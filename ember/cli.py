import argparse
import sys
from typing import List, Optional

from ember import __version__
from ember.config import RenderOptions, resolve_configuration
from ember.errors import EmberError
from ember.render import generate_files


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog='ember',
		description='Embed a binary file as a constant std::array in a C++ header/source pair',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  %(prog)s assets/icon.png                # Creates assets/icon.png.hpp and .cpp, symbol icon_png
  %(prog)s -s icon assets/icon.png        # Uses 'icon' as the array name
  %(prog)s -n res --signed data.bin       # int8_t elements inside namespace res
        """
	)

	parser.add_argument(
		'input_file',
		help='Input binary file to embed'
	)

	parser.add_argument(
		'-s', '--symbol',
		default='',
		help='Name of the generated array (default: input file name with dots replaced by underscores)'
	)

	parser.add_argument(
		'-n', '--namespace',
		default='',
		help='Wrap both generated files in this namespace'
	)

	parser.add_argument(
		'--signed',
		action='store_true',
		help='Declare elements as int8_t instead of uint8_t'
	)

	parser.add_argument(
		'--bytes-per-line',
		type=int,
		default=RenderOptions.bytes_per_line,
		help='Array elements per line in the source file (default: %(default)s)'
	)

	parser.add_argument(
		'--strict',
		action='store_true',
		help='Reject symbol and namespace names that are not valid C++ identifiers'
	)

	parser.add_argument(
		'--atomic',
		action='store_true',
		help='Stage both files and move them into place only after both are written'
	)

	parser.add_argument(
		'-v', '--verbose',
		action='store_true',
		help='Enable verbose output'
	)

	parser.add_argument(
		'-q', '--quiet',
		action='store_true',
		help='Suppress the success message'
	)

	parser.add_argument(
		'--version',
		action='version',
		version=f'%(prog)s {__version__}'
	)

	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)

	try:
		options = RenderOptions(bytes_per_line=args.bytes_per_line)
		config = resolve_configuration(
			args.input_file,
			symbol=args.symbol,
			namespace=args.namespace,
			signed=args.signed,
			strict=args.strict,
			options=options,
		)

		if args.verbose:
			print(f'Input: {config.path}')
			print(f'Header: {config.header_dest}')
			print(f'Source: {config.source_dest}')
			print(f'Symbol: {config.symbol}')
			if config.namespace:
				print(f'Namespace: {config.namespace}')
			print(f'Element type: {options.element_type(config.signed)}')

		byte_count = generate_files(config, options, atomic=args.atomic)

		if not args.quiet:
			print(f"Successfully embedded {byte_count:,} bytes into '{config.header_dest}' and '{config.source_dest}'")

		return 0

	except (EmberError, OSError) as e:
		print(f'Error: {e}', file=sys.stderr)
		return 1

	except KeyboardInterrupt:
		print('\nOperation cancelled by user.', file=sys.stderr)
		return 1


if __name__ == '__main__':
	sys.exit(main())
