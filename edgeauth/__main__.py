import sys

from edgeauth.cli import main

sys.exit(main())
