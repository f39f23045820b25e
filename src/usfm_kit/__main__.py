import sys

from usfm_kit.cli import main

sys.exit(main())
