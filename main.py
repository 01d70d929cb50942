import sys

# local module imports
from session import GameSession
import logutil


def main():
    '''
    Play the commands in the file given as first argument, or from standard
    input. The first line is 'seed size name', e.g. '1 50 My World'.
    '''
    if len(sys.argv)>1:
        path = sys.argv[1]
        logutil.log("MAIN", f"Playing commands from {path}")
        with open(path) as f:
            lines = f.read().splitlines()
    else:
        lines = sys.stdin.read().splitlines()
    session = GameSession()
    for text in session.play(lines):
        print(text)
    for error in session.errors:
        print(error, file=sys.stderr)
    return 0 if session.world is not None else 1


if __name__ == '__main__':
    sys.exit(main())
