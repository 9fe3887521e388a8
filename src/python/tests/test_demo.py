"""
===============================================================================
HAMILTON - Demo Driver Test Suite
===============================================================================
Configuration loading, report rows and exit status of the demo driver.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from hamilton import demo
from hamilton import DivisionError, Quaternion


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def config_file(tmp_path):
    """Write a demo config that overrides only the second operand."""
    path = tmp_path / "demo.yaml"
    path.write_text(
        "demo:\n"
        "  second: \"0+1i+0j+0k\"\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    return str(path)


# =============================================================================
# Test: Configuration
# =============================================================================

class TestLoadConfig:
    """Tests for YAML configuration loading."""

    def test_default_config_file(self):
        config = demo.load_config()
        assert Quaternion.value_of(config['demo']['first']) == Quaternion(12, -34, 1, 5)
        assert Quaternion.value_of(config['demo']['second']) == Quaternion(1, -2, -1, 2)
        assert config['logging']['level'] == 'INFO'

    def test_default_config_ships_with_package(self):
        """The bundled YAML sits next to the module, not in the source tree."""
        package_dir = os.path.dirname(os.path.abspath(demo.__file__))
        assert str(demo.DEFAULT_CONFIG_PATH.parent) == package_dir
        assert demo.DEFAULT_CONFIG_PATH.exists()

    def test_partial_config_keeps_defaults(self, config_file):
        config = demo.load_config(config_file)
        assert config['demo']['first'] == demo.DEFAULT_CONFIG['demo']['first']
        assert config['demo']['second'] == "0+1i+0j+0k"
        assert config['logging']['level'] == 'DEBUG'

    def test_empty_config_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert demo.load_config(str(path)) == demo.DEFAULT_CONFIG

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            demo.load_config(str(tmp_path / "absent.yaml"))

    def test_defaults_not_shared(self, monkeypatch, tmp_path):
        monkeypatch.setattr(demo, 'DEFAULT_CONFIG_PATH', tmp_path / "absent.yaml")
        config = demo.load_config()
        config['demo']['first'] = 'changed'
        assert demo.DEFAULT_CONFIG['demo']['first'] != 'changed'


# =============================================================================
# Test: Report
# =============================================================================

class TestBuildReport:
    """Tests for the labelled demo rows."""

    def test_rows(self):
        rows = dict(demo.build_report(Quaternion(12, -34, 1, 5),
                                      Quaternion(1, -2, -1, 2)))
        assert rows['plus'] == Quaternion(13, -36, 0, 7)
        assert rows['clone equals to original'] is True
        assert rows['clone is not the same object'] is True
        assert rows['string conversion equals to original'] is True
        assert rows['equals'] is False
        assert rows['isZero'] is False
        assert rows['real'] == 12.0

    def test_zero_second_operand(self):
        with pytest.raises(DivisionError):
            demo.build_report(Quaternion(1, 0, 0, 0), Quaternion.zero())


# =============================================================================
# Test: Entry point
# =============================================================================

class TestMain:
    """Tests for command-line behaviour and exit status."""

    def test_default_run(self, capsys):
        assert demo.main([]) == 0
        out = capsys.readouterr().out
        assert "first: 12.0-34.0i+1.0j+5.0k" in out
        assert "plus: 13.0-36.0i+0.0j+7.0k" in out

    def test_operands_from_arguments(self, capsys):
        assert demo.main(["--", "-1-2i+3j-4.5k", "0+1i+0j+0k"]) == 0
        out = capsys.readouterr().out
        assert "first: -1.0-2.0i+3.0j-4.5k" in out
        assert "second: 0.0+1.0i+0.0j+0.0k" in out

    def test_operands_from_config(self, capsys, config_file):
        assert demo.main(["--config", config_file]) == 0
        assert "second: 0.0+1.0i+0.0j+0.0k" in capsys.readouterr().out

    def test_malformed_operand(self, capsys):
        assert demo.main(["not-a-quaternion"]) == 1
        assert capsys.readouterr().out == ""

    def test_zero_operand(self, capsys):
        assert demo.main(["1+2i+3j+4k", "0+0i+0j+0k"]) == 1
        assert capsys.readouterr().out == ""
