import logging
import sys

from pyStump import StumpSession

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

session = StumpSession()
data = session.regenerate()
print(data.summary())
result = session.reveal()
print(result.text)

if len(sys.argv) > 1:
    print(session.export_csv(sys.argv[1]))
