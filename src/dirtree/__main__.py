import sys

from dirtree.main import main

sys.exit(main())
