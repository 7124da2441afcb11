import sys

from bank_accounts.demo import main

sys.exit(main())
