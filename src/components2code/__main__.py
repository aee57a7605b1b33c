import sys

from components2code.cli import main

sys.exit(main())
