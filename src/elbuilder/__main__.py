from __future__ import annotations

import sys

from elbuilder.main import main

sys.exit(main())
