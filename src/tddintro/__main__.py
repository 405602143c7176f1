import sys

from tddintro import main

sys.exit(main())
