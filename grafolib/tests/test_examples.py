"""
Smoke test for the example driver.
"""

import contextlib
import io
import unittest

from grafolib.examples import run_all_examples


class TestExamples(unittest.TestCase):

    def test_run_all_examples(self):
        """Test the example driver prints the expected results."""
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            run_all_examples()
        text = out.getvalue()

        self.assertIn("Diameter = 3", text)
        self.assertIn("Wiener index = 16", text)
        self.assertIn("LCA(3, 4) = 2", text)
        self.assertIn("4 components", text)
        self.assertIn("Satisfiable: False", text)
        self.assertIn("x0 = True", text)


if __name__ == '__main__':
    unittest.main()
