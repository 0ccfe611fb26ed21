import sys

from icontree.main import main

sys.exit(main())
