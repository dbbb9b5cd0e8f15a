import sys

from fraclab.cli import main

sys.exit(main())
