import sys

from permengine.cli import main

sys.exit(main())
