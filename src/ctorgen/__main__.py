import sys

from ctorgen.cli import main

sys.exit(main())
