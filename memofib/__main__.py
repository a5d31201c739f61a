import sys

from memofib.cli import run

sys.exit(run())
