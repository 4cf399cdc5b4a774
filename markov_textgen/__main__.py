import sys

from markov_textgen.cli import main

sys.exit(main())
