import sys

from nginx_stats.cli import main

sys.exit(main())
