import sys

from truffula.main import main

sys.exit(main())
