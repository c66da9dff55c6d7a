# tests/test_integration.py

"""Integration tests for the command line driver"""

import pytest
import yaml

from object_tracker.main import main


def _positions(text):
    return [tuple(float(v) for v in line.split(",")) for line in text.strip().splitlines()]


class TestMain:
    """Test the replay driver end to end"""

    def test_session_to_stdout(self, session_file, capsys):
        """Test one position line per object and step"""
        assert main(["--input", str(session_file)]) == 0

        positions = _positions(capsys.readouterr().out)
        assert len(positions) == 6

        # Object 0 is measured where it started
        for x_pos, y_pos in positions[0::2]:
            assert x_pos == pytest.approx(5.0, abs=0.01)
            assert y_pos == pytest.approx(5.0, abs=0.01)

        # Object 1 moves by one unit per step and the estimate follows
        xs = [x_pos for x_pos, _ in positions[1::2]]
        assert xs == sorted(xs)
        assert 25.0 < xs[-1] < 28.0

    def test_session_to_file(self, session_file, tmp_path, capsys):
        """Test writing positions to a file"""
        output = tmp_path / "positions.csv"
        assert main(["--input", str(session_file), "--output", str(output)]) == 0

        assert capsys.readouterr().out == ""
        assert len(_positions(output.read_text())) == 6

    def test_config_file(self, session_file, tmp_path, capsys):
        """Test a configuration file changes the estimates"""
        config = tmp_path / "tracker.yaml"
        config.write_text(yaml.safe_dump({"measurement_noise": 100.0}))

        assert main(["--input", str(session_file)]) == 0
        default_positions = _positions(capsys.readouterr().out)

        assert main(["--input", str(session_file), "--config", str(config)]) == 0
        noisy_positions = _positions(capsys.readouterr().out)

        # Heavier measurement noise follows the moving object more slowly
        assert noisy_positions[-1][0] < default_positions[-1][0]

    def test_missing_input(self, tmp_path, capsys):
        """Test missing input file"""
        assert main(["--input", str(tmp_path / "missing.txt")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_bad_header(self, tmp_path, capsys):
        """Test invalid header"""
        path = tmp_path / "bad.txt"
        path.write_text("0,3\n")
        assert main(["--input", str(path)]) == 1
        assert "non zero" in capsys.readouterr().out

    def test_invalid_config(self, session_file, tmp_path, capsys):
        """Test invalid configuration"""
        config = tmp_path / "tracker.yaml"
        config.write_text(yaml.safe_dump({"sample_time": -1.0}))
        assert main(["--input", str(session_file), "--config", str(config)]) == 1
        assert "validation failed" in capsys.readouterr().out

    @pytest.mark.parametrize("name,text", [
        ("tracker.yaml", "gamma: [0.1, 0.2\n"),
        ("tracker.json", "{\"gamma\": 0.1,"),
    ])
    def test_malformed_config(self, session_file, tmp_path, capsys, name, text):
        """Test a configuration file that does not parse"""
        config = tmp_path / name
        config.write_text(text)
        assert main(["--input", str(session_file), "--config", str(config)]) == 1
        assert "Malformed" in capsys.readouterr().out
