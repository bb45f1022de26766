# coworker/__main__.py

from coworker.main import run

run()
