import sys

from kilo_engine.app import main

sys.exit(main())
