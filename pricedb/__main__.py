import sys

from pricedb.cli import main

sys.exit(main())
