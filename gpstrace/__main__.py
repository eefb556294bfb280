import sys

from gpstrace.cli import main

sys.exit(main())
