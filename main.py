import sys

from chartaxis.application import run

sys.exit(run(sys.argv))
