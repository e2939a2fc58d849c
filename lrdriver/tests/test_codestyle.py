import importlib.util
import os.path
import subprocess
import sys
import unittest


ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)


def run_tool(tool, *args):
    if importlib.util.find_spec(tool) is None:
        raise unittest.SkipTest("%s module is missing" % tool)

    try:
        subprocess.run(
            [sys.executable, "-m", tool] + list(args),
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=ROOT,
        )
    except subprocess.CalledProcessError as ex:
        output = ex.stdout.decode()
        if ex.stderr:
            output += "\n\n" + ex.stderr.decode()
        raise AssertionError(
            "%s validation failed:\n%s" % (tool, output)
        ) from None


class TestCodeQuality(unittest.TestCase):
    def test_flake8(self):
        run_tool("flake8", "lrdriver")

    def test_mypy(self):
        config_path = os.path.join(ROOT, "pyproject.toml")
        if not os.path.exists(config_path):
            raise RuntimeError("could not locate pyproject.toml file")

        run_tool("mypy", "--config-file", config_path, "lrdriver")


if __name__ == "__main__":
    unittest.main()
