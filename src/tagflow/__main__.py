import sys

from tagflow.cli import main

sys.exit(main())
