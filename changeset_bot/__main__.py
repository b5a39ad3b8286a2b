"""Run the webhook server: python -m changeset_bot."""

import sys

from changeset_bot.main import main

sys.exit(main())
