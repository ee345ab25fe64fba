import sys

from opmonitor.cli import main

sys.exit(main())
