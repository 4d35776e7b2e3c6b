"""Allow ``python -m tableland_env``."""

import sys

from tableland_env.main import main

sys.exit(main())
