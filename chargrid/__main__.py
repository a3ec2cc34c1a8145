#
# PROJECT: chargrid
# MODULE: chargrid/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .cli import main

raise SystemExit(main())
