"""Allow ``python -m dodgefall``."""
import sys

from dodgefall.main import main

sys.exit(main())
