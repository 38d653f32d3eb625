import sys

from pig_latin.cli import main

sys.exit(main())
