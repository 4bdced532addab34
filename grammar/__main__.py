"""
Command-line entry point.

    python -m grammar notes.txt
    echo "Their going home." | python -m grammar --json
    python -m grammar draft.txt --apply --lexicon house_style.json
"""

import sys
import json
import argparse

from config_logging import ConfigurationError
from .engine import check_grammar, get_default_engine
from .formatter import apply_suggestions
from .lexicon import load_lexicon_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m grammar',
        description='Rule-based grammar and style checker'
    )
    parser.add_argument('file', nargs='?', help='Text file to check (stdin when omitted)')
    parser.add_argument('--json', action='store_true', help='Print errors as JSON')
    parser.add_argument('--apply', action='store_true',
                        help='Print the text with first suggestions applied')
    parser.add_argument('--lexicon', type=str, help='JSON file of lexicon overrides')
    parser.add_argument('--rules', action='store_true', help='List active rules and exit')
    return parser


def _format_error(text: str, error) -> str:
    line = text.count('\n', 0, error.start_index) + 1
    column = error.start_index - (text.rfind('\n', 0, error.start_index) + 1) + 1
    suggestions = ', '.join(repr(s) for s in error.suggestions)
    return f"{line}:{column}: {error.message}: {error.text!r} -> {suggestions}"


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.lexicon:
        try:
            load_lexicon_file(args.lexicon)
        except ConfigurationError as e:
            print(f"error: {e.message}", file=sys.stderr)
            return 2

    if args.rules:
        for rule in get_default_engine().describe_rules():
            print(f"{rule['rule_id']:<20} {rule['category']:<18} {rule['message']}")
        return 0

    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
            return 2
    else:
        text = sys.stdin.read()

    errors = check_grammar(text)

    if args.apply:
        sys.stdout.write(apply_suggestions(text, errors))
    elif args.json:
        print(json.dumps([e.to_dict() for e in errors], indent=2))
    else:
        for error in errors:
            print(_format_error(text, error))

    return 1 if errors and not args.apply else 0


if __name__ == '__main__':
    sys.exit(main())
