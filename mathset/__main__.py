import argparse
import logging
import mathset
import sys
import typing

def _parseSet(text: str) -> mathset.Set[str]:
    return mathset.Set.fromIterable(
        element.strip() for element in text.split(',') if element.strip())

def _formatSet(value: mathset.Set[str]) -> str:
    return '{{{contents}}}'.format(contents=', '.join(sorted(value)))

def _createParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mathset',
        description='Evaluate set operations on comma separated lists of strings')
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {mathset.__version__}')
    subparsers = parser.add_subparsers(dest='command', required=True)

    unionParser = subparsers.add_parser('union', help='Print the union of the given sets')
    unionParser.add_argument('sets', nargs='+', metavar='SET')

    intersectionParser = subparsers.add_parser('intersection', help='Print the intersection of the given sets')
    intersectionParser.add_argument('sets', nargs='+', metavar='SET')

    subtractParser = subparsers.add_parser('subtract', help='Print the first set minus the second')
    subtractParser.add_argument('minuend', metavar='SET')
    subtractParser.add_argument('subtrahend', metavar='SET')

    retainParser = subparsers.add_parser('retain', help='Keep only the listed elements of a set')
    retainParser.add_argument('set', metavar='SET')
    retainParser.add_argument('elements', nargs='+', metavar='ELEMENT')

    return parser

def main(argv: typing.Optional[typing.Sequence[str]] = None) -> int:
    args = _createParser().parse_args(argv)

    config = mathset.Config.fromEnvironment()
    mathset.setupLogger(logLevel=config.logLevel(), logFile=config.logFile())

    if args.command == 'union':
        result = mathset.union(*[_parseSet(text) for text in args.sets])
        print(_formatSet(result))
    elif args.command == 'intersection':
        result = mathset.intersection(*[_parseSet(text) for text in args.sets])
        print(_formatSet(result))
    elif args.command == 'subtract':
        result = _parseSet(args.minuend)
        result.subtract(_parseSet(args.subtrahend))
        print(_formatSet(result))
    elif args.command == 'retain':
        result = _parseSet(args.set)
        removed, retained = result.retainAll(*args.elements)
        print(_formatSet(result))
        print(f'removed={removed} retained={retained}')

    logging.debug(f'Command {args.command} complete')
    return 0

if __name__ == '__main__':
    sys.exit(main())
