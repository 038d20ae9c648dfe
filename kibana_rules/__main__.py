import sys

from kibana_rules.cli import main

sys.exit(main())
