import sys
import unittest

from lrdriver.tests import suite


if __name__ == "__main__":
    result = unittest.TextTestRunner().run(suite())
    sys.exit(not result.wasSuccessful())
