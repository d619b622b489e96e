import sys

from rooftop_rainfall.cli.main import main

sys.exit(main())
