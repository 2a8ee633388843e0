import sys

from phonosearch.cli import main

sys.exit(main())
