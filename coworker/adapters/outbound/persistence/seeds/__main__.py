# coworker/adapters/outbound/persistence/seeds/__main__.py

import asyncio
import logging

from coworker.adapters.outbound.persistence.seeds import main

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

asyncio.run(main())
