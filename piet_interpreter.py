#!/usr/bin/env python3
"""
Piet Programming Language Interpreter

Decode a Piet program image into color blocks and run it.

Examples:
    # Run a program drawn with 1x1 pixel codels
    python3 piet_interpreter.py hello.png

    # Program scaled up so every codel is 10x10 pixels
    python3 piet_interpreter.py -c 10 hello_big.png

    # Fetch the image over HTTP
    python3 piet_interpreter.py https://example.org/piet/hello.png

    # List the color blocks without running
    python3 piet_interpreter.py --dump hello.png

    # Log every executed instruction to stderr
    python3 piet_interpreter.py --trace fizzbuzz.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from piet import PietError, compile_image, load_image, run_program


def configure_logging(verbose: bool, trace: bool) -> None:
    """Send log records to stderr; program output stays on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    if trace:
        logging.getLogger('piet.engine').setLevel(logging.DEBUG)


def dump_program(source: str, codel_size: int) -> None:
    """Print the segmented block list."""
    program = compile_image(load_image(source), codel_size)
    w, h = program.size()
    print(f"{source}: {w}x{h} codels, {len(program.blocks)} color blocks")
    for line in program.describe():
        print(line)


def execute(source: str, codel_size: int) -> None:
    """Load, compile and run a program image."""
    program = compile_image(load_image(source), codel_size)
    halt = run_program(program)
    logging.getLogger(__name__).info("Executed %d instructions, final stack: %s",
                                     halt.steps, halt.stack)
    sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Piet esoteric language interpreter',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument('image',
                        help='Program image path or http(s) URL')
    parser.add_argument('-c', '--codel-size', type=int, default=1,
                        help='Pixels per codel edge (default: 1)')
    parser.add_argument('--dump', action='store_true',
                        help='Print the color blocks and exit')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Debug logging to stderr')
    parser.add_argument('--trace', action='store_true',
                        help='Log every executed instruction')

    args = parser.parse_args(argv)

    if args.codel_size < 1:
        parser.error('Codel size must be >= 1')

    configure_logging(args.verbose, args.trace)

    try:
        if args.dump:
            dump_program(args.image, args.codel_size)
        else:
            execute(args.image, args.codel_size)

    except PietError as e:
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]", file=sys.stderr)
        return 130

    return 0


if __name__ == '__main__':
    sys.exit(main())
