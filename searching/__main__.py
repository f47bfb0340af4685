import sys

from searching.cli import main

sys.exit(main())
