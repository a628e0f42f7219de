import sys

from huffcodec.cli import main

sys.exit(main())
