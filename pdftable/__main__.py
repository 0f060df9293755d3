import sys

from pdftable.cli import main

sys.exit(main())
