"""
Tests for the command line interface.
"""

import json

from code128_encoder.__main__ import main


class TestEncodeCommand:
    """Tests for encoding from the command line."""

    def test_text_output(self, capsys):
        exit_code = main(["TEST", "--mode", "b"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Code Set: B" in out
        assert "Checksum: 76" in out

    def test_json_output(self, capsys):
        exit_code = main(["1234", "--mode", "C", "--json"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data["symbols"] == [105, 12, 34, 82, 106]

    def test_font_output(self, capsys):
        assert main(["TEST", "--mode", "b", "--font"]) == 0
        assert capsys.readouterr().out.strip() == "ÌTESTlÎ"

    def test_gs1(self, capsys):
        assert main(["0106285096000842", "--mode", "auto", "--gs1", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["symbols"][:2] == [105, 102]


class TestErrors:
    """Tests for error reporting."""

    def test_invalid_mode(self, capsys):
        assert main(["abc", "--mode", "", "--json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["type"] == "InvalidModeError"

    def test_precondition_reports_alphabet(self, capsys):
        assert main(["abc", "--mode", "a", "--json"]) == 1
        data = json.loads(capsys.readouterr().out)

        assert data["type"] == "EncodingPreconditionError"
        assert "set A" in data["alphabet"]
        assert data["index"] == 0

    def test_plain_error_to_stderr(self, capsys):
        assert main(["123", "--mode", "c"]) == 1
        assert "even" in capsys.readouterr().err


class TestValidateOnly:
    """Tests for --validate-only."""

    def test_valid(self, capsys):
        assert main(["ABC123", "--mode", "a", "--validate-only"]) == 0
        assert "Valid: True" in capsys.readouterr().out

    def test_invalid_json(self, capsys):
        assert main(["abc", "--mode", "a", "--validate-only", "--json"]) == 1
        data = json.loads(capsys.readouterr().out)

        assert data["valid"] is False
        assert data["code_set"] == "A"
        assert data["errors"]
