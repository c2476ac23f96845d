import sys

from bikestore.cli import main

sys.exit(main())
