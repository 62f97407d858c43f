import sys

from glabcidoc.cli.main import main

sys.exit(main())
