#!/usr/bin/env python3

"""
Name: rot13
Description: Rotate the Latin letters by 13 positions
Author: Mark Rosetta (@marked on GitHub)
Contributor: brian d foy, bdfoy@cpan.org
License: artistic2
"""

import sys
import codecs
import argparse

__version__ = "1.1"

# Exit codes
EX_SUCCESS = 0
EX_FAILURE = 1

def rot13(text: str) -> str:
    """
    Returns `text` with every ASCII letter rotated by 13 positions.

    Case is preserved and all other characters (digits, punctuation,
    whitespace, non-ASCII letters) pass through unchanged. Applying it
    twice gives back the original text.
    """
    # The 'rot_13' codec only maps A-Z and a-z; every other code point is left alone.
    return codecs.encode(text, 'rot_13')

def read_text(text=None, stream=None):
    """
    Returns the text given on the command line, or the whole of `stream`
    (standard input by default) if there was none.

    Standard input is read in binary mode and decoded as strict UTF-8, so
    invalid bytes raise UnicodeDecodeError whatever the locale.
    """
    if text is not None:
        return text

    if stream is None:
        stream = sys.stdin.buffer
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode('utf-8')
    # main() prints a newline of its own, so drop one here.
    if data.endswith('\r\n'):
        return data[:-2]
    if data.endswith('\n'):
        return data[:-1]
    return data

def main():
    """Parses arguments, reads the text and prints its ROT13 version."""
    parser = argparse.ArgumentParser(
        prog='rot13',
        description="Rotate the Latin letters of TEXT (or standard input) by 13 positions.",
        usage="%(prog)s [-hV] [text]"
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        'text',
        nargs='?', # Reads from stdin when omitted.
        help='ROT13 text'
    )

    args = parser.parse_args()

    try:
        text = read_text(args.text)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EX_FAILURE)

    print(rot13(text))
    sys.exit(EX_SUCCESS)

if __name__ == "__main__":
    main()
