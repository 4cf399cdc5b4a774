# main.py - run the generator CLI from a source checkout
# usage: python main.py corpus.txt --window 3 --length 300 --seed 7

import sys

from markov_textgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
