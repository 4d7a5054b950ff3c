import sys

from theme_wizard.cli import main

sys.exit(main())
