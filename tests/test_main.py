"""
Command Line Test
Tests argument validation and printed output of the calculator
"""

import io
import os
import sys
import shutil
import logging
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from arcpoint.main import main

logger = logging.getLogger(__name__)


def _run(argv):
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        try:
            code = main(argv)
        except SystemExit as e:
            code = e.code
    return code, out.getvalue(), err.getvalue()


def _write_yaml(text: str) -> str:
    fd, path = tempfile.mkstemp(suffix=".yaml")
    with os.fdopen(fd, "w") as f:
        f.write(text)
    return path


def _run_with_config(yaml_text, argv):
    path = _write_yaml(yaml_text)
    try:
        return _run(argv + ["--config", path])
    finally:
        os.remove(path)


def test_radius_arc():
    code, out, _ = _run(["--x", "5", "--y", "5", "--theta", "90", "--dlead", "1.5707963267948966", "--radius", "2"])
    assert code == 0
    assert "NEWX: 4.4142" in out
    assert "NEWY: 6.4142" in out
    assert "ARC ANGLE (deg): 45.0000" in out


def test_default_radius():
    code, out, _ = _run(["--dlead", "3.141592653589793"])
    assert code == 0
    assert "NEWX: 0.0000" in out
    assert "NEWY: 2.0000" in out
    assert "CHORD: 2.0000" in out


def test_straight_line():
    code, out, _ = _run(["--x", "1", "--y", "1", "--dlead", "3", "--straight", "--precision", "1"])
    assert code == 0
    assert "NEWX: 4.0" in out
    assert "NEWY: 1.0" in out
    assert "ARC ANGLE (deg): 0.0" in out


def test_negative_curvature():
    code, out, _ = _run(["--dlead", "1.5707963267948966", "--curvature", "-1"])
    assert code == 0
    # dlead is negated: quarter turn backwards on the unit circle
    assert "NEWX: -1.0000" in out
    assert "NEWY: 1.0000" in out
    assert "ARC ANGLE (deg): -90.0000" in out


def test_samples():
    code, out, _ = _run(["--dlead", "4", "--straight", "--samples", "5", "--precision", "1"])
    assert code == 0
    assert "Sampled path:" in out
    assert "  2.0, 0.0" in out
    assert out.rstrip().endswith("4.0, 0.0")


def test_rejects_bad_input():
    for argv in (
        ["--dlead", "nan"],
        ["--dlead", "inf"],
        ["--dlead", "1", "--radius", "0"],
        ["--dlead", "1", "--radius", "-2"],
        ["--dlead", "1", "--radius", "2", "--curvature", "0.5"],
        ["--x", "abc", "--dlead", "1"],
        [],
    ):
        code, out, err = _run(argv)
        assert code == 2, argv
        assert out == ""


def test_arc_angle_uses_default_radius():
    # Radius below epsilon: the solver falls back to the unit radius
    for argv in (
        ["--dlead", "1", "--radius", "1e-12"],
        ["--dlead", "1", "--curvature", "1e12"],
    ):
        code, out, _ = _run(argv)
        assert code == 0, argv
        assert "NEWX: 0.8415" in out
        assert "NEWY: 0.4597" in out
        assert "ARC ANGLE (deg): 57.2958" in out


def test_arc_angle_uses_clamped_dlead():
    code, out, _ = _run(["--dlead", "1e9", "--radius", "1e6"])
    assert code == 0
    assert "NEWX: 841470.9848" in out
    assert "ARC ANGLE (deg): 57.2958" in out


def test_config_solver_section():
    code, out, _ = _run_with_config("solver:\n  max_dlead: 2.0\n", ["--dlead", "10", "--radius", "100"])
    assert code == 0
    assert "NEWX: 1.9999" in out
    assert "ARC ANGLE (deg): 1.1459" in out

    code, out, _ = _run_with_config("solver:\n  default_radius: 2.0\n", ["--dlead", "3.141592653589793"])
    assert code == 0
    assert "NEWX: 2.0000" in out
    assert "NEWY: 2.0000" in out
    assert "ARC ANGLE (deg): 90.0000" in out


def test_config_display_section():
    yaml_text = "display:\n  precision: 2\n  samples: 3\n"

    code, out, _ = _run_with_config(yaml_text, ["--dlead", "4", "--straight"])
    assert code == 0
    assert "NEWX: 4.00" in out
    assert "Sampled path:" in out
    assert "  2.00, 0.00" in out

    # Flags win over the config file
    code, out, _ = _run_with_config(yaml_text, ["--dlead", "4", "--straight", "--precision", "1", "--samples", "0"])
    assert code == 0
    assert "NEWX: 4.0\n" in out
    assert "Sampled path:" not in out


def test_config_invalid_display_values_fall_back():
    for yaml_text in (
        "display:\n  precision: -3\n  samples: many\n",
        "display:\n  precision: 2.5\n  samples: -1\n",
    ):
        code, out, _ = _run_with_config(yaml_text, ["--dlead", "4", "--straight"])
        assert code == 0, yaml_text
        assert "NEWX: 4.0000" in out
        assert "Sampled path:" not in out


def test_config_invalid_solver_section():
    for yaml_text in (
        "solver:\n  epsilon: -1.0\n",
        "solver:\n  max_dlead: .nan\n",
        "solver:\n  default_radius: abc\n",
    ):
        code, out, _ = _run_with_config(yaml_text, ["--dlead", "1"])
        assert code == 1, yaml_text
        assert out == ""


def test_config_log_dir_writes_file():
    log_dir = tempfile.mkdtemp()
    arc_logger = logging.getLogger("arcpoint")
    try:
        yaml_text = f"system:\n  debug: true\n  log_dir: \"{log_dir}\"\n"
        code, _, _ = _run_with_config(yaml_text, ["--dlead", "1"])
        assert code == 0

        log_file = Path(log_dir) / "arcpoint.log"
        assert log_file.exists()
        assert "arcpoint.main - DEBUG - pose=" in log_file.read_text()
    finally:
        for handler in list(arc_logger.handlers):
            if isinstance(handler, logging.FileHandler):
                arc_logger.removeHandler(handler)
                handler.close()
        shutil.rmtree(log_dir, ignore_errors=True)


def run_all_tests():
    """Run all command line tests"""
    logger.info("=" * 70)
    logger.info("COMMAND LINE TEST SUITE")
    logger.info("=" * 70)

    tests = [(name, func) for name, func in globals().items()
             if name.startswith("test_") and callable(func)]

    passed = 0
    failed = 0

    for test_name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            logger.error(f"FAILED '{test_name}': {e!r}")
            failed += 1

    logger.info(f"\nResults: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    success = run_all_tests()
    sys.exit(0 if success else 1)
