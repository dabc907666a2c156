import sys

from swaycycle.run import main

sys.exit(main())
